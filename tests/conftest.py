import subprocess

import pytest


@pytest.fixture
def simple_sample_html():
    return """
    <html><body>
    <div class="part"><section>
    <h3>Sample Input 1</h3><pre>3
</pre>
    </section></div>
    <div class="part"><section>
    <h3>Sample Output 1</h3><pre>9
</pre>
    </section></div>
    </body></html>
    """


@pytest.fixture
def atcoder_task_html():
    """Task page with Japanese and English statements, three samples each."""
    def statement(title_in, title_out, constraints):
        parts = [
            f"""<div class="part"><section><h3>{constraints}</h3>
            <ul><li>1 \\leq N \\leq 100</li></ul><pre>N
A_1 A_2 ... A_N</pre></section></div>"""
        ]
        for index, (given, expected) in enumerate(
            [("3\n1 2 3", "6"), ("1\n5\n", "5\n"), ("2\n10 20", "30")], start=1
        ):
            parts.append(
                f"""<div class="part"><section><h3>{title_in} {index}</h3>"""
                f"""<pre>{given}</pre></section></div>"""
            )
            parts.append(
                f"""<div class="part"><section><h3>{title_out} {index}</h3>"""
                f"""<pre>{expected}</pre><p>Explanation.</p></section></div>"""
            )
        return "\n".join(parts)

    return f"""
    <html><head><title>A - Sum</title></head><body>
    <div id="task-statement"><span class="lang">
    <span class="lang-ja">{statement("入力例", "出力例", "制約")}</span>
    <span class="lang-en">{statement("Sample Input", "Sample Output", "Constraints")}</span>
    </span></div>
    </body></html>
    """


@pytest.fixture
def no_sample_html():
    return """
    <html><body>
    <section><h3>Input</h3><pre>N M</pre></section>
    <section><h3>Notes</h3><pre>1 2 3</pre></section>
    <pre>4 5 6</pre>
    </body></html>
    """


@pytest.fixture
def workspace(tmp_path):
    """Contest workspace named after the contest, holding a cargo manifest."""
    root = tmp_path / "abc322"
    root.mkdir()
    (root / "Cargo.toml").write_text(
        '[package]\nname = "abc322"\nversion = "0.1.0"\nedition = "2021"\n\n'
        '[dependencies]\nproconio = "0.4"\n',
        encoding="utf-8",
    )
    return root.resolve()


@pytest.fixture
def fake_subprocess_run(monkeypatch):
    """Record subprocess.run calls and answer with a configurable exit status."""
    calls = []
    state = {"returncode": 0}

    def fake_run(command, input=None, cwd=None, **kwargs):
        calls.append({"command": list(command), "input": input, "cwd": cwd})
        return subprocess.CompletedProcess(command, state["returncode"])

    monkeypatch.setattr(subprocess, "run", fake_run)
    fake_run.calls = calls
    fake_run.state = state
    return fake_run


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    for name in ("CPTASK_BASE_URL", "CPTASK_USER_AGENT", "CPTASK_TIMEOUT", "CPTASK_CARGO"):
        monkeypatch.delenv(name, raising=False)
