import logging

import typer

from sprcracker.spr import runner as spr

app = typer.Typer()
app.add_typer(spr.app, name='spr')


@app.callback()
def main(
    verbose: int = typer.Option(
        0, '--verbose', '-v', count=True, help='Repeat for more output'
    ),
) -> None:
    if verbose >= 2:
        logging.basicConfig(level=logging.DEBUG)
    elif verbose == 1:
        logging.basicConfig(level=logging.INFO)
    else:
        logging.basicConfig(level=logging.WARNING)


if __name__ == "__main__":
    app()
