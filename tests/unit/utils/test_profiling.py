from __future__ import annotations

from pathlib import Path

from cfgtree.core.config import ConfigManager
from cfgtree.core.utils.profiling import Profiler, enable_profiler, span


def test_span_is_noop_without_profiler() -> None:
    with span("nothing"):
        pass


def test_profiler_records_nested_spans() -> None:
    profiler = Profiler()
    with enable_profiler(profiler):
        with span("outer", kind="test"):
            with span("inner"):
                pass

    records = {r.name: r for r in profiler.spans}
    assert records["outer"].depth == 0
    assert records["inner"].depth == 1
    assert records["outer"].meta == {"kind": "test"}
    assert set(profiler.summary_ms()) == {"outer", "inner"}


def test_config_loading_is_profiled(tmp_path: Path, write_config) -> None:
    write_config("config.yaml", {"a": 1})
    profiler = Profiler()
    with enable_profiler(profiler):
        ConfigManager(tmp_path).get("a")

    names = [r.name for r in profiler.spans]
    assert "config.load.defaults" in names
    assert "config.load.file" in names
    assert "config.load.env" in names
