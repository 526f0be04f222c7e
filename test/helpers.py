"""
Tests for the internal helpers (Unset, coalesce, rename, mirror).

Scope
- Unset is a falsey singleton that cannot be subclassed.
- coalesce() only replaces Unset.
- rename() relabels decorated functions.
- mirror() exposes a read-only view, handing lists out as tuples.

Conventions
- Test method names follow CamelCase per project convention.
"""
import unittest
from unittest import TestCase

from dashdash.utils import *


class UnsetTest(TestCase):

    def testSingleton(self):
        self.assertIs(UnsetType(), Unset)

    def testRepr(self):
        self.assertEqual(repr(Unset), "Unset")

    def testFalsely(self):
        self.assertFalse(Unset)
        self.assertIsNot(Unset, None)

    def testFinalClass(self):
        with self.assertRaises(TypeError):
            type("Sentinel", (UnsetType,), {})


class CoalesceTest(TestCase):

    def testUnsetIsReplaced(self):
        self.assertEqual(coalesce(Unset, ["."]), ["."])

    def testUnsetDefaultsToNone(self):
        self.assertIsNone(coalesce(Unset))

    def testFalseyValuesArePreserved(self):
        for value in (None, 0, "", [], False):
            self.assertIs(coalesce(value, ["."]), value)


class RenameTest(TestCase):

    def testDecorator(self):
        @rename("__repr__")
        def f(self):
            pass

        self.assertEqual(f.__name__, "__repr__")
        self.assertEqual(f.__qualname__, "__repr__")

    def testNameMustBeString(self):
        with self.assertRaises(TypeError):
            rename(42)


class MirrorTest(TestCase):

    class Holder:
        keys = mirror("keys")
        registry = mirror("registry")

        def __init__(self):
            self._keys = ["name", "age"]
            self._registry = object()

    def testListIsHandedOutAsTuple(self):
        holder = self.Holder()
        keys = holder.keys
        holder._keys.append("size")

        self.assertEqual(keys, ("name", "age"))
        self.assertEqual(holder.keys, ("name", "age", "size"))

    def testOtherValuesAreReturnedAsStored(self):
        holder = self.Holder()
        self.assertIs(holder.registry, holder._registry)

    def testReadOnly(self):
        with self.assertRaises(AttributeError):
            self.Holder().keys = ()

    def testGetterIsNamedAfterAttribute(self):
        self.assertEqual(self.Holder.keys.fget.__name__, "keys")

    def testNameMustBeString(self):
        with self.assertRaises(TypeError):
            mirror(1)


if __name__ == '__main__':
    unittest.main()
