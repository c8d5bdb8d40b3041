"""vfdwrap — toNative wrapping for vue-facing-decorator class components."""

from vfdwrap._version import __version__
from vfdwrap.fix.rewriter import apply_transform, transform
from vfdwrap.plugin import PluginOptions, plugin_options, plugin_vfd
from vfdwrap.scanner.preflight import passes_preflight
from vfdwrap.scanner.scoring import compute_confidence, exports_class_component, is_class_component

__all__ = [
    "__version__",
    "passes_preflight",
    "exports_class_component",
    "compute_confidence",
    "is_class_component",
    "apply_transform",
    "transform",
    "plugin_vfd",
    "plugin_options",
    "PluginOptions",
]
