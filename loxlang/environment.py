"""Variable environment.

A single flat namespace shared by the whole program. `var` declarations
define (or redefine) names, assignments overwrite existing ones, and
lookups of unknown names fail with a located `UndefinedVariableError`.


File: environment.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from loxlang.exceptions import UndefinedVariableError
from loxlang.position import Located


class Environment:
    """
    Mapping from variable name to runtime value.
    """
    def __init__(self):
        self.values: dict[str, object] = {}

    def define(self, name: str, value) -> None:
        """
        Bind `name`, replacing any previous binding.
        """
        self.values[name] = value

    def get(self, name: Located[str]):
        """
        Look up a variable.

        Raises:
            UndefinedVariableError: If the name has no binding.
        """
        if name.value in self.values:
            return self.values[name.value]
        raise UndefinedVariableError(name.pos, name.value)

    def assign(self, name: Located[str], value) -> None:
        """
        Rebind an existing variable.

        Raises:
            UndefinedVariableError: If the name was never defined.
        """
        if name.value not in self.values:
            raise UndefinedVariableError(name.pos, name.value)
        self.values[name.value] = value

    def __contains__(self, name: str) -> bool:
        return name in self.values
