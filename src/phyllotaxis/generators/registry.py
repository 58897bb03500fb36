from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Callable

import numpy as np

from phyllotaxis.model.parameters import GeneratorParams, PhyllotaxisModel

if TYPE_CHECKING:
    import numpy.typing as npt

logger = logging.getLogger(__name__)

Generator = Callable[[GeneratorParams], "npt.NDArray[np.float64]"]

_REGISTRY: dict[type[GeneratorParams], Generator] = {}

def register_generator(params_cls: type[GeneratorParams]) -> Callable[[Generator], Generator]:
    """Function decorator to register a generator for a parameters class."""
    if getattr(params_cls, "MODEL", None) is None:
        raise ValueError(f"{params_cls.__name__} must define MODEL")

    def decorator(func: Generator) -> Generator:
        _REGISTRY[params_cls] = func
        return func

    return decorator

def generate(params: GeneratorParams) -> npt.NDArray[np.float64]:
    """Run the generator registered for the type of `params`."""
    func = _REGISTRY.get(type(params))
    if func is None:
        raise KeyError(f"No generator registered for '{type(params).__name__}'")
    logger.debug(f"Dispatching {type(params).__name__} to {func.__name__}.")
    return func(params)

def list_models() -> list[PhyllotaxisModel]:
    return [cls.MODEL for cls in _REGISTRY]
