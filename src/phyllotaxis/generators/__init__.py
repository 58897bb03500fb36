"""
Point Generators
================
Auto-import all generator modules to ensure registration side-effects run.

After importing this package, `generate()` knows every model and
`list_models()` reports them.

Note: This package should be pure Python/NumPy and should NOT import PyVista.
"""
from __future__ import annotations

import importlib
import pkgutil

from phyllotaxis.generators.registry import generate, list_models, register_generator

for _module in pkgutil.iter_modules(__path__, __name__ + "."):
    importlib.import_module(_module.name)

__all__ = ["generate", "list_models", "register_generator"]
