"""sigparams CLI - generate signature parameters for a message."""
import logging
import sys
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape

app = typer.Typer(
    name="sigparams",
    help="RSA signature parameter generator",
    add_completion=False
)
err_console = Console(stderr=True)


@app.command()
def generate(
    msg: str = typer.Option(..., "--msg", "-m", help="Message to sign"),
    toml: bool = typer.Option(False, "--toml", "-t", help="Print output in TOML format"),
    pss: bool = typer.Option(False, "--pss", "-p", help="Use RSA PSS"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log pipeline stages to stderr"),
    seed: Optional[int] = typer.Option(
        None, "--seed", hidden=True,
        help="Seed a deterministic (insecure) random source"
    ),
):
    """Sign a message and print hash, signature and modulus limbs."""
    from sigparams import setup_logging
    from sigparams.core.config import GeneratorConfig
    from sigparams.core.crypto import SecureRandomSource, SeededRandomSource
    from sigparams.core.exceptions import SigParamsError
    from sigparams.core.pipeline import SignaturePipeline
    from sigparams.core.render import get_renderer
    
    config = GeneratorConfig.from_flags(
        toml=toml, pss=pss,
        log_level=logging.DEBUG if verbose else logging.WARNING
    )
    if verbose:
        logging.basicConfig(
            level=config.log_level,
            stream=sys.stderr,
            format="%(asctime)s %(name)s %(levelname)s: %(message)s"
        )
    setup_logging(config.log_level)
    
    randfunc = SeededRandomSource(seed) if seed is not None else SecureRandomSource()
    
    try:
        bundle = SignaturePipeline(config, randfunc=randfunc).run(msg)
    except SigParamsError as e:
        err_console.print(f"[red]{e.stage or 'generate'} failed: {escape(str(e))}[/red]", highlight=False)
        raise typer.Exit(1)
    except Exception as e:
        err_console.print(f"[red]generate failed: {escape(str(e))}[/red]", highlight=False)
        raise typer.Exit(1)
    
    renderer = get_renderer(config.output_format, config.bignum_type)
    typer.echo(renderer.render(bundle))


def main():
    """Entry point."""
    app()


if __name__ == "__main__":
    main()
