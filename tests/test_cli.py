#!/usr/bin/env python3
'''
Unit tests for the command line interface
'''

from contextlib import redirect_stderr, redirect_stdout
from io import StringIO
from pathlib import Path
import sys
import unittest

import yaml

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / 'src'))

from targetprops import triple as t
from targetprops.cli import main, parse_triple
from targetprops.common.config import get_config
from targetprops.triple import EnvId, ObjectFormat, OsId


def run(*argv):
    out, err = StringIO(), StringIO()
    with redirect_stdout(out), redirect_stderr(err):
        status = main(list(argv))
    return status, out.getvalue(), err.getvalue()


class TestParseTriple(unittest.TestCase):
    '''Test building triples from piece names'''

    def test_pieces(self):
        triple = parse_triple('x86_64', 'Linux', 'gnu', 'elf')
        self.assertEqual(triple.arch, t.X86_64)
        self.assertIs(triple.os, OsId.LINUX)
        self.assertIs(triple.env, EnvId.GNU)
        self.assertIs(triple.objfmt, ObjectFormat.ELF)

    def test_unknown_arch(self):
        with self.assertRaises(KeyError):
            parse_triple('vax', 'none')

    def test_family_spelling(self):
        '''The 65C816 is accepted under its family name as well'''
        self.assertEqual(parse_triple('w65c816', 'none').arch, t.W65C816)
        self.assertEqual(parse_triple('wc65c816', 'none').arch, t.W65C816)


class TestMain(unittest.TestCase):
    '''Test the resolve and list commands'''

    def tearDown(self):
        get_config().reset()

    def test_resolve(self):
        status, out, _ = run('resolve', '--arch', 'x86_64', '--os', 'none', '--objfmt', 'elf')
        self.assertEqual(status, 0)

        document = yaml.safe_load(out)
        self.assertEqual(document['target']['triple'], 'x86_64-none-elf')
        self.assertEqual(document['machine'], 'x86-64')
        self.assertEqual(document['features'], ['cmov', 'cx', 'cx8', 'fsgs'])
        self.assertEqual(document['properties'], {})

    def test_resolve_machine(self):
        status, out, _ = run(
            'resolve', '--arch', 'i686', '--os', 'lilium', '--machine', 'pentium3',
        )
        self.assertEqual(status, 0)

        document = yaml.safe_load(out)
        self.assertEqual(document['machine'], 'pentium3')
        self.assertIn('sse', document['features'])
        self.assertEqual(document['target']['system_tag'], 'fastcall-unix')
        self.assertEqual(document['properties'], {'rust.abi.rustcall-tag': 'fastcall-unix'})

    def test_unsupported(self):
        status, out, err = run('resolve', '--arch', 'x86_64', '--os', 'linux')
        self.assertEqual(status, 1)
        self.assertEqual(out, '')
        self.assertTrue(err.startswith('error: unsupported target x86_64-linux'))

    def test_unknown_names(self):
        status, _, err = run('resolve', '--arch', 'vax', '--os', 'none')
        self.assertEqual(status, 1)
        self.assertIn("unknown architecture 'vax'", err)

        status, _, err = run('resolve', '--arch', 'x86_64', '--os', 'plan9')
        self.assertEqual(status, 1)
        self.assertTrue(err.startswith('error:'))

    def test_unknown_machine(self):
        status, _, err = run('resolve', '--arch', 'x86_64', '--os', 'linux', '--env', 'gnu', '--machine', 'i386')
        self.assertEqual(status, 1)
        self.assertIn('unknown machine', err)

    def test_global_options(self):
        status, _, _ = run('--unknown-features', 'ignore', '--log-level', 'error', 'list')
        self.assertEqual(status, 0)
        self.assertEqual(get_config().unknown_features, 'ignore')

    def test_list(self):
        status, out, _ = run('list')
        self.assertEqual(status, 0)

        document = yaml.safe_load(out)
        self.assertIn('x86_64', document['arch'])
        self.assertIn('lilium', document['os'])
        self.assertIn('gnux32', document['env'])
        self.assertIn('elf', document['objfmt'])

    def test_version(self):
        with self.assertRaises(SystemExit) as cm:
            run('--version')
        self.assertEqual(cm.exception.code, 0)


if __name__ == '__main__':
    unittest.main()
