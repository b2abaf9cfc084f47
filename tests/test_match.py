#!/usr/bin/env python3
'''
Unit tests for ordered rule tables and triples
'''

from pathlib import Path
import sys
import unittest

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / 'src'))

from targetprops import triple as t
from targetprops.resolver.match import ANY, RuleTable, when
from targetprops.triple import ArchFamily, EnvId, ObjectFormat, OsId, Triple


class TestArchId(unittest.TestCase):
    '''Test tagged architecture ids'''

    def test_aliases_compare_equal(self):
        '''Spellings of the same family and level are equal'''
        self.assertEqual(t.I86, t.I8086)
        self.assertEqual(hash(t.I86), hash(t.I086))
        self.assertNotEqual(t.I86, t.I186)
        self.assertNotEqual(t.X86_64, t.X86_64V2)
        self.assertEqual(t.ARCH_IDS['w65c816'], t.ARCH_IDS['wc65c816'])

    def test_str(self):
        self.assertEqual(str(t.X86_64), 'x86_64')
        self.assertEqual(t.ARCH_IDS['i686'], t.I686)

    def test_triple_str(self):
        triple = Triple(t.X86_64, OsId.LINUX, EnvId.GNU)
        self.assertEqual(str(triple), 'x86_64-linux-gnu')
        self.assertEqual(str(Triple(t.CLEVER, objfmt = ObjectFormat.ELF)), 'clever-none-elf')


class TestPattern(unittest.TestCase):
    '''Test pattern matching'''

    def test_wildcards(self):
        '''Unset fields match anything'''
        self.assertTrue(ANY.matches(Triple(t.M6502)))
        self.assertTrue(when(os = OsId.LINUX).matches(Triple(t.I386, OsId.LINUX, EnvId.MUSL)))

    def test_family_selector(self):
        '''A family selector matches every level of the family'''
        pattern = when(arch = ArchFamily.X86_32)
        self.assertTrue(pattern.matches(Triple(t.I386)))
        self.assertTrue(pattern.matches(Triple(t.I786)))
        self.assertFalse(pattern.matches(Triple(t.X86_64)))

    def test_exact_selector(self):
        '''An exact id selector matches only that level'''
        pattern = when(arch = t.X86_64V3)
        self.assertTrue(pattern.matches(Triple(t.X86_64V3)))
        self.assertFalse(pattern.matches(Triple(t.X86_64V4)))

    def test_env_absent(self):
        '''A pattern with an env does not match a triple without one'''
        pattern = when(os = OsId.LINUX, env = EnvId.GNU)
        self.assertFalse(pattern.matches(Triple(t.X86_64, OsId.LINUX)))

    def test_overlaps_by_family(self):
        '''A family selector overlaps the ids of that family only'''
        family = when(arch = ArchFamily.X86_32)
        self.assertTrue(family.overlaps(when(arch = t.I686)))
        self.assertTrue(when(arch = t.I686).overlaps(family))
        self.assertFalse(family.overlaps(when(arch = t.X86_64)))
        self.assertFalse(family.overlaps(when(arch = ArchFamily.CLEVER)))

    def test_overlaps_by_id(self):
        self.assertTrue(when(arch = t.I86).overlaps(when(arch = t.I8086)))
        self.assertFalse(when(arch = t.X86_64).overlaps(when(arch = t.X86_64V2)))
        self.assertTrue(ANY.overlaps(when(arch = t.CLEVER)))

    def test_overlaps_other_fields(self):
        '''Disjoint OS or env sets rule out an overlap'''
        lilium = when(arch = ArchFamily.X86_64, os = OsId.LILIUM)
        self.assertFalse(lilium.overlaps(when(os = OsId.LINUX)))
        self.assertTrue(lilium.overlaps(when(env = EnvId.KERNEL)))
        self.assertFalse(
            when(env = EnvId.GNU).overlaps(when(env = (EnvId.MSVC, EnvId.KERNEL)))
        )

    def test_multiple_values(self):
        pattern = when(os = (OsId.LILIUM, OsId.CLEVEROS))
        self.assertTrue(pattern.matches(Triple(t.CLEVER, OsId.CLEVEROS)))
        self.assertFalse(pattern.matches(Triple(t.CLEVER, OsId.LINUX)))


class TestRuleTable(unittest.TestCase):
    '''Test first-match-wins lookup'''

    def setUp(self):
        self.table = RuleTable('test', [
            (when(arch = ArchFamily.X86_64, os = OsId.LILIUM, env = EnvId.KERNEL), 'kernel'),
            (when(arch = ArchFamily.X86_64, os = OsId.LILIUM), 'lilium'),
            (when(arch = ArchFamily.X86_64, objfmt = ObjectFormat.ELF), 'elf'),
        ])

    def test_order_decides(self):
        '''The first of several matching rules wins'''
        triple = Triple(t.X86_64, OsId.LILIUM, EnvId.KERNEL, ObjectFormat.ELF)
        self.assertEqual(self.table.lookup(triple), 'kernel')
        self.assertEqual(self.table.lookup(Triple(t.X86_64, OsId.LILIUM)), 'lilium')
        self.assertEqual(self.table.lookup(Triple(t.X86_64, objfmt = ObjectFormat.ELF)), 'elf')

    def test_reordered_table(self):
        '''Moving a generic rule first shadows the specific ones'''
        reordered = RuleTable('reordered', list(reversed(list(self.table))))
        triple = Triple(t.X86_64, OsId.LILIUM, EnvId.KERNEL, ObjectFormat.ELF)
        self.assertEqual(reordered.lookup(triple), 'elf')

    def test_no_match(self):
        self.assertIsNone(self.table.lookup(Triple(t.I386, OsId.LILIUM)))
        self.assertIsNone(self.table.match(Triple(t.X86_64, OsId.LINUX)))

    def test_values_distinct(self):
        '''values() lists each rule value once, in rule order'''
        shared = object()
        table = RuleTable('shared', [(ANY, shared), (ANY, 'x'), (ANY, shared)])
        self.assertEqual(len(table), 3)
        self.assertEqual(table.values(), [shared, 'x'])


if __name__ == '__main__':
    unittest.main()
