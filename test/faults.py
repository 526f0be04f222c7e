"""
Faults module behavioral tests (API misuse errors and their rich rendering).

Scope
- Validate the builtin exception families each fault belongs to.
- Validate message/hint storage and argument checks.
- Validate plain-text rendering through a rich Console, hint line included.

Conventions
- Test method names follow CamelCase per project convention.
- Rendering is captured with a colorless Console writing to a StringIO.
"""

from __future__ import annotations

import io
import unittest
from unittest import TestCase

from rich.console import Console

from dashdash import DashDashFault, LayoutError, RegistrationError, TokenError


def render(renderable):
    file = io.StringIO()
    Console(file=file, color_system=None, width=80).print(renderable)
    return file.getvalue()


class TestFaults(TestCase):
    """Behavioral tests for the fault hierarchy."""

    def testFamilies(self):
        self.assertTrue(issubclass(RegistrationError, TypeError))
        self.assertTrue(issubclass(TokenError, TypeError))
        self.assertTrue(issubclass(LayoutError, ValueError))
        for fault in (RegistrationError, TokenError, LayoutError):
            self.assertTrue(issubclass(fault, DashDashFault))

    def testMessageAndHint(self):
        fault = LayoutError("'line_length' must be at least 1", hint="got 0")
        self.assertEqual(fault.message, "'line_length' must be at least 1")
        self.assertEqual(fault.hint, "got 0")
        self.assertEqual(str(fault), "'line_length' must be at least 1")

    def testHintDefaultsToNone(self):
        self.assertIsNone(TokenError("token list must only contain strings").hint)

    def testMessageMustBeAString(self):
        with self.assertRaises(TypeError):
            TokenError(42)

    def testHintMustBeAString(self):
        with self.assertRaises(TypeError):
            TokenError("bad", hint=42)


class TestFaultRendering(TestCase):
    """Behavioral tests for DashDashFault.__rich__."""

    def testWithoutHint(self):
        self.assertEqual(
            render(RegistrationError("declaration key must be a string")),
            "[ dashdash | Bad Registration ]\n"
            "declaration key must be a string\n",
        )

    def testWithHint(self):
        self.assertEqual(
            render(LayoutError("'left_indent' must be at least 0", hint="got -1")),
            "[ dashdash | Bad Layout ]\n"
            "'left_indent' must be at least 0\n"
            " → got -1\n",
        )

    def testMarkupInMessageIsLiteral(self):
        self.assertIn("[bold]tokens[/bold]", render(TokenError("[bold]tokens[/bold]")))


if __name__ == "__main__":
    unittest.main()
