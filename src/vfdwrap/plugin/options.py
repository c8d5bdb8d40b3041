"""Plugin options — dataclass and factory function."""

from __future__ import annotations

import os
import re
from dataclasses import dataclass, field
from typing import Callable

from vfdwrap.scanner.scoring import is_class_component as default_is_class_component


@dataclass
class PluginOptions:
    """Options for the toNative plugin.

    Attributes:
        is_class_component: Predicate deciding whether a file gets rewritten.
                            Replaces both the preflight filter and the
                            classifier when supplied.
        test:               Resource paths the host should route to the
                            transform.
        enforce:            Ordering hint for the host; ``"post"`` runs the
                            transform after the Vue loader.
    """

    is_class_component: Callable[[str], bool] = default_is_class_component
    test: re.Pattern[str] = field(default_factory=lambda: re.compile(r"\.vue$"))
    enforce: str = "post"


def plugin_options(
    *,
    is_class_component: Callable[[str], bool] | None = None,
    test: str | re.Pattern[str] | None = None,
) -> PluginOptions:
    """Create a :class:`PluginOptions` with sensible defaults::

        from vfdwrap import plugin_options, plugin_vfd

        plugin = plugin_vfd(plugin_options(is_class_component=my_check))
    """
    options = PluginOptions()
    if is_class_component is not None:
        options.is_class_component = is_class_component
    if test is not None:
        options.test = re.compile(test) if isinstance(test, str) else test
    return options


def _is_plugin_disabled() -> bool:
    """Return True when the kill-switch env var is active.

    Set ``VFDWRAP_PLUGIN=off`` (case-insensitive) to pass every file
    through untouched.
    """
    val = os.environ.get("VFDWRAP_PLUGIN", "").strip().lower()
    return val in ("off", "0", "false", "no", "disabled")
