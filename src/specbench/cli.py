from __future__ import annotations

from pathlib import Path

import typer

app = typer.Typer(name="specbench", help="Run describe/it specs with typed expectations")

EXAMPLE_SPEC = '''\
from specbench import describe, expect_int, expect_string, it, spec, suite_main
from specbench import not_to_be, to_be, to_be_like


@spec("Example")
def example():
    @describe("arithmetic")
    def _():
        @it("adds small numbers")
        def _():
            expect_int(2 + 2, to_be(4))
            expect_int(2 + 2, not_to_be(5))

    @describe("greetings")
    def _():
        @it("ignores case when alike")
        def _():
            expect_string("Hello", to_be_like("hello"))


if __name__ == "__main__":
    suite_main()
'''


@app.command()
def run(
    paths: list[str] = typer.Argument(help="Spec files or directories of *_spec.py files"),
    config: str | None = typer.Option(None, help="Path to YAML run config"),
    epsilon: float | None = typer.Option(
        None, help="Tolerance for to_be_like/not_to_be_like on doubles"
    ),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Enable debug output to stderr"
    ),
    debug_log: str | None = typer.Option(None, help="Write debug log to this file"),
):
    """Import spec files, run every registered spec and exit with the verdict."""
    from specbench.config import RunConfig, load_config
    from specbench.context import configure
    from specbench.errors import SpecUsageError
    from specbench.loader import load_spec_files
    from specbench.registry import run_suite
    from specbench.verbose import setup_logger, teardown_logger

    overrides: dict = {}
    if epsilon is not None:
        overrides["epsilon"] = epsilon
    if verbose:
        overrides["verbose"] = True
    if debug_log is not None:
        overrides["debug_log"] = debug_log

    try:
        if config is not None:
            config_path = Path(config)
            if not config_path.exists():
                typer.echo(f"Error: config file not found: {config}", err=True)
                raise typer.Exit(1)
            base = load_config(config_path)
        else:
            base = RunConfig()
        run_config = RunConfig(**{**base.model_dump(), **overrides})
    except ValueError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    configure(run_config)
    logger = setup_logger(
        Path(run_config.debug_log) if run_config.debug_log else None,
        verbose=run_config.verbose,
        logger_name="specbench",
    )
    try:
        try:
            load_spec_files([Path(p) for p in paths])
        except FileNotFoundError as e:
            typer.echo(f"Error: {e}", err=True)
            raise typer.Exit(1)
        except Exception as e:
            typer.echo(f"Error: failed to import specs: {e}", err=True)
            raise typer.Exit(2)

        try:
            code = run_suite()
        except SpecUsageError as e:
            typer.echo(f"Error: {e}", err=True)
            raise typer.Exit(2)
    finally:
        teardown_logger(logger)

    raise typer.Exit(code)


@app.command()
def init(
    dir: str = typer.Option("specs", "--dir", help="Directory to write the example spec in"),
):
    """Write an example spec file to start from."""
    project_dir = Path(dir)
    project_dir.mkdir(parents=True, exist_ok=True)

    example = project_dir / "example_spec.py"
    if example.exists():
        typer.echo(f"example_spec.py already exists in {dir}, skipping.")
        return

    example.write_text(EXAMPLE_SPEC)
    typer.echo(f"Initialized specs in {dir}:")
    typer.echo("  example_spec.py  - example spec, run with: specbench run " + dir)
