from __future__ import annotations

from liswat import LispValue
from liswat.errors import LiswatTypeError
from liswat.types.lambda_fn import Lambda, Primitive, is_procedure
from liswat.types.symbol import Symbol


class MacroEnvironment:
    """
    Macro table mapping macro names (Symbols) to procedures.

    Each Interpreter owns one and passes it explicitly through expansion, so
    separate interpreters never see each other's macros. Transformers are
    Lambdas registered by define-syntax or Primitives registered from Python;
    both receive the unevaluated argument list and return the replacement form.
    Entries are overwritten on redefinition.
    """

    def __init__(self):
        self.macros: dict[Symbol, Lambda | Primitive] = {}

    def define_macro(self, name: Symbol, transformer: LispValue) -> None:
        if not isinstance(name, Symbol):
            raise LiswatTypeError(f"macro name must be a symbol, got {name}")
        if not is_procedure(transformer):
            raise LiswatTypeError(f"macro must be a procedure: {name}")
        self.macros[name] = transformer

    def is_macro(self, sym: LispValue) -> bool:
        return isinstance(sym, Symbol) and sym in self.macros

    def get(self, sym: Symbol) -> Lambda | Primitive | None:
        return self.macros.get(sym)

    def __contains__(self, sym: object) -> bool:
        return self.is_macro(sym)

    def __len__(self) -> int:
        return len(self.macros)
