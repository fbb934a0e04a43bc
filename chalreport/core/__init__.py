_LAZY_EXPORTS = {
    # models
    "Challenge",
    "TestedStatus",
    "CombinedRecord",
    # scan / load
    "scan",
    "load_record",
    "try_load_record",
    # layout / rendering
    "ReportSchema",
    "Column",
    "get_schema",
    "ReportConfig",
    "write_report",
    "render_table",
    "render_preview",
}


def __getattr__(name: str):
    if name not in _LAZY_EXPORTS:
        raise AttributeError(f"module 'chalreport.core' has no attribute {name!r}")

    if name in {"Challenge", "TestedStatus", "CombinedRecord"}:
        from . import models
        return getattr(models, name)
    if name in {"scan"}:
        from .scanner import scan
        return scan
    if name in {"load_record", "try_load_record"}:
        from . import loader
        return getattr(loader, name)
    if name in {"ReportSchema", "Column", "get_schema"}:
        from . import schema
        return getattr(schema, name)
    if name in {"ReportConfig", "write_report", "render_table", "render_preview"}:
        from . import renderer
        return getattr(renderer, name)

    raise AttributeError(f"module 'chalreport.core' has no attribute {name!r}")


__all__ = list(_LAZY_EXPORTS)
