'''Enum bases that print as their member names'''

from enum import Enum, IntFlag
from typing import List


class NamedEnum(Enum):
    '''Enum whose str/repr is the bare member name'''

    def __str__(self):
        return self.name

    def __repr__(self):
        return self.__str__()

    @classmethod
    def from_name(cls, name: str):
        '''Look up a member by case-insensitive name or value'''
        key = name.strip()
        for member in cls:
            if member.name.lower() == key.lower() or str(member.value) == key:
                return member

        raise KeyError(f'unknown {cls.__name__} {name!r}')


class NamedFlag(IntFlag):
    '''IntFlag that prints as "A|B" and can list its set members'''

    def names(self) -> List[str]:
        '''Names of the single-bit members contained in this value'''
        return [
            m.name for m in type(self)
            if m.value and m.value & (m.value - 1) == 0 and self.value & m.value
        ]

    def __str__(self):
        return '|'.join(self.names()) or '0'

    def __repr__(self):
        return self.__str__()
