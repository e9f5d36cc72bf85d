"""
File: tests/test_cli.py
Purpose: CLI entrypoints: smoke run always exits 0; readiness checklist flags missing packaging.
"""

import functools
import json

import httpx

import smoke_runner.__main__ as smoke_cli
from smoke_runner.config import Settings
from smoke_runner.readiness import CheckLevel, main as readiness_main, run_checklist


def _refused(request: httpx.Request) -> httpx.Response:
    raise httpx.ConnectError("Connection refused", request=request)


def test_smoke_cli_exits_zero_when_target_is_down(monkeypatch, capsys):
    monkeypatch.setattr(smoke_cli, "configure_logging", lambda level=None: None)
    monkeypatch.setattr(
        smoke_cli,
        "SmokeTestRunner",
        functools.partial(smoke_cli.SmokeTestRunner, transport=httpx.MockTransport(_refused)),
    )
    code = smoke_cli.main(["--base-url", "http://localhost:5999", "--delay", "0", "--json"])
    assert code == 0
    out = capsys.readouterr().out
    assert out.count("[fail]") == 3
    report = json.loads(out[out.index("{"):])
    assert report["failed"] == 3
    assert report["base_url"] == "http://localhost:5999"


def test_smoke_cli_exits_zero_on_malformed_base_url(monkeypatch, capsys):
    monkeypatch.setattr(smoke_cli, "configure_logging", lambda level=None: None)
    code = smoke_cli.main(["--base-url", "http://localhost:abc", "--delay", "0"])
    assert code == 0
    lines = capsys.readouterr().out.strip().splitlines()
    fail_lines = [line for line in lines if line.startswith("[fail]")]
    assert len(fail_lines) == 3
    assert all("failed: InvalidURL" in line for line in fail_lines)
    assert lines[-1] == "[done] Smoke test completed: probes=3 passed=0 failed=3"


def test_settings_defaults(monkeypatch):
    for name in ("SMOKE_BASE_URL", "SMOKE_STARTUP_DELAY_SECS", "SMOKE_HTTP_TIMEOUT_SECS", "READINESS_REQUIRED_ENV"):
        monkeypatch.delenv(name, raising=False)
    s = Settings(_env_file=None)
    assert s.SMOKE_BASE_URL == "http://localhost:5000"
    assert s.SMOKE_STARTUP_DELAY_SECS == 3.0
    assert s.SMOKE_HTTP_TIMEOUT_SECS == 5.0
    assert s.required_env == ["DATABASE_URL", "JWT_SECRET"]


def test_settings_from_env(monkeypatch):
    monkeypatch.setenv("SMOKE_BASE_URL", "http://staging:8080")
    monkeypatch.setenv("READINESS_REQUIRED_ENV", " A , ,B")
    s = Settings(_env_file=None)
    assert s.SMOKE_BASE_URL == "http://staging:8080"
    assert s.required_env == ["A", "B"]


def test_checklist_ready_repo(tmp_path):
    (tmp_path / ".git").mkdir()
    (tmp_path / "pyproject.toml").write_text("[project]\nname = 'x'\n")
    items = run_checklist(tmp_path, env={"DATABASE_URL": "postgres://db", "JWT_SECRET": "s"},
                          required_env=["DATABASE_URL", "JWT_SECRET"], required_dists=["pytest", "httpx"])
    assert [i.name for i in items] == ["git", "packaging", "dependencies", "DATABASE_URL", "JWT_SECRET"]
    assert all(i.level is CheckLevel.OK for i in items)


def test_checklist_missing_env_only_warns(tmp_path):
    (tmp_path / "pyproject.toml").write_text("")
    items = run_checklist(tmp_path, env={"JWT_SECRET": "  "}, required_env=["JWT_SECRET"], required_dists=[])
    levels = {i.name: i.level for i in items}
    assert levels == {
        "git": CheckLevel.WARN,
        "packaging": CheckLevel.OK,
        "dependencies": CheckLevel.OK,
        "JWT_SECRET": CheckLevel.WARN,
    }
    assert "deployment platform" in items[-1].line()


def test_checklist_missing_distribution_warns_with_install_hint(tmp_path):
    (tmp_path / "pyproject.toml").write_text("")
    missing = "no-such-distribution-for-readiness"
    items = run_checklist(tmp_path, env={}, required_env=[], required_dists=["pytest", missing])
    deps = next(i for i in items if i.name == "dependencies")
    assert deps.level is CheckLevel.WARN
    assert missing in deps.detail
    assert f"pip install {missing}" in deps.detail
    assert "pytest" not in deps.detail


def test_checklist_uninstalled_project_warns(tmp_path, monkeypatch):
    import smoke_runner.readiness as readiness

    monkeypatch.setattr(readiness, "PROJECT_DIST", "no-such-project-for-readiness")
    assert readiness.declared_requirements(readiness.PROJECT_DIST) is None
    monkeypatch.setattr(readiness, "declared_requirements", lambda: None)
    items = run_checklist(tmp_path, env={}, required_env=[])
    deps = next(i for i in items if i.name == "dependencies")
    assert deps.level is CheckLevel.WARN
    assert "pip install -e ." in deps.detail


def test_readiness_main_fails_without_packaging(tmp_path, capsys):
    code = readiness_main([str(tmp_path)])
    assert code == 1
    out = capsys.readouterr().out
    assert "[fail] packaging" in out


def test_readiness_main_passes_with_packaging(tmp_path, capsys, monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "postgres://db")
    monkeypatch.setenv("JWT_SECRET", "secret")
    (tmp_path / "pyproject.toml").write_text("")
    assert readiness_main([str(tmp_path)]) == 0
    assert "failures=0" in capsys.readouterr().out
