"""Sandbox test runner: imports test modules and runs their test_* functions."""
import importlib
import time
import traceback
from collections import Counter

from rich.console import Console
from rich.rule import Rule

STYLES = {"PASS": "green", "FAIL": "red", "ERROR": "yellow"}


class SandboxRunner:
    def __init__(self, package: str = "tft.sandbox", console: Console | None = None):
        self.package = package
        self.console = console or Console(highlight=False)
        self.results: list[tuple[str, str, str | None]] = []
        self.start_time = 0.0

    @property
    def all_passed(self) -> bool:
        return all(status == "PASS" for status, _, _ in self.results)

    def _record(self, status: str, name: str, detail: str | None = None) -> None:
        self.results.append((status, name, detail))
        style = STYLES[status]
        suffix = f": {detail}" if detail else ""
        self.console.print(f"  [{style}]{status}[/{style}] {name}{suffix}", markup=True)

    def test(self, name: str, fn) -> None:
        try:
            fn()
        except AssertionError as e:
            self._record("FAIL", name, str(e) or "assertion failed")
        except Exception as e:
            self._record("ERROR", name, f"{type(e).__name__}: {e}")
            for line in traceback.format_exc().splitlines()[-3:]:
                self.console.print(f"        {line}", markup=False)
        else:
            self._record("PASS", name)

    def run(self, modules: list[str]) -> None:
        self.start_time = time.time()
        self.console.print(Rule("[bold]Time for Trial Sandbox[/bold]"))

        for mod_name in modules:
            full = f"{self.package}.test_{mod_name}"
            self.console.print(f"[cyan]{mod_name}[/cyan]")
            try:
                mod = importlib.import_module(full)
            except ImportError as e:
                self._record("ERROR", f"import:{mod_name}", str(e))
                continue

            tests = [(n, fn) for n, fn in vars(mod).items() if n.startswith("test_") and callable(fn)]
            if not tests:
                self.console.print(f"  [yellow]no tests in {full}[/yellow]")
            for fn_name, fn in tests:
                self.test(f"{mod_name}:{fn_name.removeprefix('test_')}", fn)

    def report(self) -> None:
        counts = Counter(status for status, _, _ in self.results)
        elapsed = time.time() - self.start_time
        summary = ", ".join(
            f"[{STYLES[s]}]{counts[s]} {s.lower()}[/{STYLES[s]}]" for s in STYLES if counts[s]
        )
        self.console.print(Rule())
        self.console.print(f"{summary or 'no tests'} of {len(self.results)} ({elapsed:.1f}s)")

        failures = [r for r in self.results if r[0] != "PASS"]
        if failures:
            self.console.print("\n[red bold]Not passing:[/red bold]")
            for status, name, detail in failures:
                self.console.print(f"  {status} {name}", markup=False)
                if detail:
                    self.console.print(f"      {detail}", markup=False)
