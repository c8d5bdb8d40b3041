"""Build-pipeline adapter and ``plugin_vfd()`` convenience factory.

Usage with a host that exposes ``api.transform(descriptor, handler)``::

    from vfdwrap import plugin_vfd

    plugin = plugin_vfd()
    plugin.setup(api)

Usage without a host (e.g. from a custom loader)::

    code = plugin_vfd().transform(code, "src/components/Hello.vue")

Kill switch
-----------
Set ``VFDWRAP_PLUGIN=off`` to return every file unchanged.
"""

from __future__ import annotations

import logging
from typing import Any, Callable

from vfdwrap.fix.rewriter import transform_result
from vfdwrap.plugin.options import PluginOptions, _is_plugin_disabled

logger = logging.getLogger("vfdwrap.plugin")

PLUGIN_NAME = "plugin-vfd"


class VfdPlugin:
    """Wraps class-style component exports in ``toNative`` after the Vue
    loader has compiled the file.

    Holds no per-file state; one instance can serve any number of files.
    """

    name = PLUGIN_NAME

    def __init__(self, options: PluginOptions | None = None) -> None:
        self.options = options or PluginOptions()
        self._disabled = _is_plugin_disabled()

    @property
    def test(self):
        return self.options.test

    @property
    def enforce(self) -> str:
        return self.options.enforce

    def matches(self, resource_path: str) -> bool:
        """Return True when the host should route ``resource_path`` here."""
        return self.options.test.search(resource_path) is not None

    def transform(self, code: str, resource_path: str | None = None) -> str:
        """Handler body: the compiled text in, the replacement text out."""
        if self._disabled:
            return code

        result = transform_result(code, self.options.is_class_component)
        if result.changed:
            logger.debug(
                "Wrapped %d export(s) with toNative in %s",
                result.replacements,
                resource_path or "<anonymous>",
            )
        return result.code

    def setup(self, api: Any) -> None:
        """Register the transform with a host plugin API."""
        descriptor = {"test": self.options.test, "enforce": self.options.enforce}
        api.transform(descriptor, self._make_handler())

    def _make_handler(self) -> Callable[[Any], str]:
        def handler(context: Any) -> str:
            if isinstance(context, dict):
                code = context.get("code", "")
                resource_path = context.get("resource_path") or context.get("resourcePath")
            else:
                code = getattr(context, "code", "")
                resource_path = getattr(context, "resource_path", None) or getattr(
                    context, "resourcePath", None
                )
            return self.transform(code, resource_path)

        return handler


def plugin_vfd(options: PluginOptions | None = None) -> VfdPlugin:
    """Create a :class:`VfdPlugin`, using the built-in predicate by default."""
    return VfdPlugin(options)
