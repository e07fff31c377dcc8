from __future__ import annotations

import inspect
import logging
import reprlib
from functools import wraps
from typing import Any, Callable, Iterable, MutableMapping, Optional, Sequence, Set, TypeVar, cast

import numpy as np

from .geometry import Site

F = TypeVar("F", bound=Callable[..., Any])

_repr = reprlib.Repr()
_repr.maxother = 160
_repr.maxlist = 8
_repr.maxtuple = 8
_repr.maxset = 8


def _summarize_array(value: np.ndarray, max_items: int) -> str:
    parts = [f"ndarray(shape={tuple(value.shape)}, dtype={value.dtype})"]
    if 0 < value.size <= max_items:
        parts.append(f"values={_repr.repr(value.tolist())}")
    elif value.size > max_items and np.issubdtype(value.dtype, np.number):
        parts.append(f"min={float(value.min()):.6g}")
        parts.append(f"max={float(value.max()):.6g}")
    return ", ".join(parts)


def _safe_repr(value: Any, *, max_items: int = 6, max_length: int = 300) -> str:
    if isinstance(value, np.ndarray):
        return _summarize_array(value, max_items)
    if isinstance(value, Site):
        return f"Site#{value.index}({value.x:.6g}, {value.y:.6g})"
    site = getattr(value, "site", None)
    if isinstance(site, Site):
        # arcs and site events are identified by their site
        return f"{type(value).__name__}[{_safe_repr(site)}]"
    arc = getattr(value, "arc", None)
    if arc is not None and hasattr(value, "center"):
        return f"{type(value).__name__}[{_safe_repr(arc)} center={_repr.repr(value.center)}]"
    if isinstance(value, (list, tuple)):
        open_br, close_br = ("(", ")") if isinstance(value, tuple) else ("[", "]")
        items = [_safe_repr(item) for item in value[:max_items]]
        if len(value) > max_items:
            items.append(f"... ({len(value)} items)")
        return f"{open_br}{', '.join(items)}{close_br}"

    rendered = _repr.repr(value)
    if len(rendered) > max_length:
        return rendered[:max_length] + "... (truncated)"
    return rendered


def _format_arguments(args: Sequence[Any], kwargs: MutableMapping[str, Any]) -> str:
    parts = []
    if args:
        parts.append("args=[" + ", ".join(_safe_repr(arg) for arg in args) + "]")
    if kwargs:
        parts.append("kwargs={" + ", ".join(f"{k}={_safe_repr(v)}" for k, v in kwargs.items()) + "}")
    return ", ".join(parts) if parts else "no-args"


def debug_log_call(
    logger: logging.Logger, *, name: Optional[str] = None, log_result: bool = True
) -> Callable[[F], F]:
    """Return a decorator that emits DEBUG logs on entry and exit of a call."""

    def decorator(func: F) -> F:
        if getattr(func, "_debug_logging_wrapped", False):
            return func

        qualname = name or getattr(func, "__qualname__", func.__name__)

        @wraps(func)
        def wrapper(*args: Any, **kwargs: Any):
            if not logger.isEnabledFor(logging.DEBUG):
                return func(*args, **kwargs)
            # drop ``self`` from the rendered arguments of methods
            shown = args[1:] if args and "." in qualname else args
            logger.debug("Entering %s (%s)", qualname, _format_arguments(shown, kwargs))
            try:
                result = func(*args, **kwargs)
            except Exception:
                logger.exception("Exception in %s", qualname)
                raise
            if log_result:
                logger.debug("Exiting %s -> %s", qualname, _safe_repr(result))
            else:
                logger.debug("Exiting %s", qualname)
            return result

        setattr(wrapper, "_debug_logging_wrapped", True)
        return cast(F, wrapper)

    return decorator


def apply_debug_logging(
    namespace: MutableMapping[str, Any],
    *,
    logger: Optional[logging.Logger] = None,
    skip: Optional[Iterable[str]] = None,
) -> None:
    """Wrap the functions and class methods defined in ``namespace``."""

    module_name = namespace.get("__name__")
    logger = logger or logging.getLogger(module_name or __name__)
    skip_set: Set[str] = set(skip or [])

    for name, value in list(namespace.items()):
        if name in skip_set or getattr(value, "__module__", None) != module_name:
            continue
        if inspect.isfunction(value):
            namespace[name] = debug_log_call(logger, name=name)(value)
        elif inspect.isclass(value):
            for attr, member in list(vars(value).items()):
                qualified = f"{value.__name__}.{attr}"
                if attr.startswith("__") or attr in skip_set or qualified in skip_set:
                    continue
                if inspect.isfunction(member):
                    setattr(value, attr, debug_log_call(logger, name=qualified)(member))


__all__ = ["apply_debug_logging", "debug_log_call"]
