"""
Resolved target

A Target bundles the profiles selected for one triple. Feature sets and
property maps are derived from it on demand, optionally for an explicitly
selected machine, and are never cached on the Target.
"""

from dataclasses import dataclass
from typing import Any, Dict, FrozenSet, Optional, Tuple, Union

from ..resolver.features import compute_enabled_features
from ..resolver.merge import merge_properties
from ..triple import Triple
from . import PropertyPairs, PropertyValue, property_pairs
from .abi import AbiProfile, PrimitiveLayout
from .arch import Architecture, Machine
from .link import SupportedArtifacts, LinkProfile
from .os import OperatingSystem

MachineRef = Union[Machine, str]


@dataclass(frozen=True)
class Target:
    """Target properties for one triple"""
    triple: Triple
    arch: Architecture
    os: OperatingSystem
    default_tag: str
    system_tag: str
    primitive_layout: PrimitiveLayout
    abi: AbiProfile
    link: LinkProfile
    override_features: Tuple[Tuple[str, bool], ...] = ()
    extended_properties: PropertyPairs = ()

    def __post_init__(self):
        object.__setattr__(
            self, "override_features",
            tuple((name, bool(enable)) for name, enable in self.override_features),
        )
        object.__setattr__(self, "extended_properties", property_pairs(self.extended_properties))

    @property
    def env_name(self) -> Optional[str]:
        return None if self.triple.env is None else self.triple.env.value

    def _machine(self, machine: Optional[MachineRef]) -> Optional[Machine]:
        if isinstance(machine, str):
            return self.arch.machine(machine)
        return machine

    def enabled_features(self, machine: Optional[MachineRef] = None, policy: Optional[str] = None) -> FrozenSet[str]:
        """Features enabled on this target

        `machine` is the explicitly selected machine (a Machine or its name);
        without one the architecture's default machine is used.
        """
        mach = self._machine(machine) or self.arch.default_machine
        return compute_enabled_features(
            self.arch.features,
            mach.features,
            self.override_features,
            arch_name=self.arch.name,
            policy=policy,
        )

    def resolved_properties(self, machine: Optional[MachineRef] = None) -> Dict[str, PropertyValue]:
        """Extended properties in effect on this target"""
        mach = self._machine(machine)
        return merge_properties(
            self.arch.name,
            self.arch.properties,
            self.arch.default_machine.properties,
            self.os.properties,
            self.extended_properties,
            None if mach is None else mach.properties,
        )

    def supports(self, artifacts: SupportedArtifacts) -> bool:
        return self.link.supports(artifacts)

    def summary(self) -> Dict[str, Any]:
        """Plain-data description of the target"""
        layout = self.primitive_layout
        ints = layout.int_layout
        link = self.link
        return {
            "triple": str(self.triple),
            "arch": {
                "name": self.arch.name,
                "aliases": list(self.arch.aliases),
                "width": self.arch.raw_width,
                "default_machine": self.arch.default_machine.name,
                "machines": self.arch.machine_names(),
                "call_tags": list(self.arch.call_tags),
            },
            "os": {
                "name": self.os.name,
                "families": list(self.os.family_names),
                "unix_like": self.os.is_unix_like,
                "windows_like": self.os.is_windows_like,
                "freestanding": self.os.is_freestanding,
            },
            "env": self.env_name,
            "default_tag": self.default_tag,
            "system_tag": self.system_tag,
            "layout": {
                "int": ints.int_width,
                "long": ints.long_width,
                "long_long": ints.llong_width,
                "size": ints.size_width,
                "intmax": ints.intmax_width,
                "data_pointer": ints.data_pointer_width,
                "fn_pointer": ints.fn_pointer_width,
                "split_pointers": ints.is_split_pointer,
                "byte_order": ints.byte_order.value,
                "max_int_align": layout.max_int_align,
                "max_simd_align": layout.max_simd_align,
                "long_double_align": layout.ldouble_align,
                "long_double_bits": layout.ldouble_format.total_bits,
            },
            "abi": {
                "float_pass": None if self.abi.float_pass_override is None else self.abi.float_pass_override.value,
                "simd_pass": None if self.abi.simd_pass_override is None else self.abi.simd_pass_override.value,
            },
            "link": {
                "object_format": link.formats.object_binfmt,
                "exec_format": link.formats.exec_binfmt,
                "staticlib_format": str(link.formats.staticlib_format),
                "artifacts": link.formats.supported_artifacts.names(),
                "linker": link.formats.default_linker_format.value,
                "nx_stack": link.nx_stack.value,
                "dynlinker": link.dynlinker_name,
                "libraries": [] if link.default_libraries is None else list(link.default_libraries.libraries),
            },
            "override_features": [
                ("+" if enable else "-") + name for name, enable in self.override_features
            ],
        }
