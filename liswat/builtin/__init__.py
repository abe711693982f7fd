"""Builtin procedures and macro transformers installed in every Interpreter."""
