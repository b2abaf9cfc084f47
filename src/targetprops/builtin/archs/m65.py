"""6502 and derivatives"""

from ...properties.arch import Architecture, AsmSpec, FeatureVocabulary, Machine

M6502_FEATURES = FeatureVocabulary(["instr-ext", "cmos"])

M6502_MACHINES = (
    Machine("m6502"),
    Machine("m6502x", ("instr-ext",)),
    Machine("m65c02", ("cmos",)),
)

# Only the one machine for now
W65_MACHINES = (Machine("wdc65c16"),)

M6502_ASM = AsmSpec("6502")
W65_ASM = AsmSpec("65816")

M6502 = Architecture(
    name="m6502",
    machines=M6502_MACHINES,
    default_machine=M6502_MACHINES[0],
    raw_width=8,
    features=M6502_FEATURES,
    call_tags=("C",),
    asm=M6502_ASM,
)

# CMOS 6502
M65C02 = Architecture(
    name="m65c02",
    aliases=("m6502",),
    machines=M6502_MACHINES,
    default_machine=M6502_MACHINES[2],
    raw_width=8,
    features=M6502_FEATURES,
    call_tags=("C",),
    asm=M6502_ASM,
)

# WDC 65C816
W65 = Architecture(
    name="w65",
    machines=W65_MACHINES,
    default_machine=W65_MACHINES[0],
    raw_width=16,
    call_tags=("C",),
    asm=W65_ASM,
)
