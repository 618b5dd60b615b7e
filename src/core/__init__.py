"""
Core numeral primitives and the value type built on them.

This module contains the conversion algorithms, the validation grammar and
the immutable RomanNumber value. Everything here is pure and independent of
any front-end.
"""
