"""Builtin architectures"""

from ... import triple as t
from ...resolver.match import RuleTable, when
from . import clever, m65, x86

ARCH_RULES = RuleTable("architecture", [
    (when(arch=(t.I86, t.I8086, t.I086, t.I186)), x86.A8086),
    (when(arch=t.I286), x86.I286),
    (when(arch=t.I386), x86.I386),
    (when(arch=t.I486), x86.I486),
    (when(arch=t.I586), x86.I586),
    (when(arch=t.I686), x86.I686),
    (when(arch=t.I786), x86.I786),
    (when(arch=t.X86_64), x86.X86_64),
    (when(arch=t.X86_64V2), x86.X86_64_V2),
    (when(arch=t.X86_64V3), x86.X86_64_V3),
    (when(arch=t.X86_64V4), x86.X86_64_V4),
    (when(arch=t.W65C816), m65.W65),
    (when(arch=t.M6502), m65.M6502),
    (when(arch=t.M65C02), m65.M65C02),
    (when(arch=t.CLEVER), clever.CLEVER),
])
