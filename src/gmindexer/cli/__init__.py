import click


@click.group()
@click.version_option()
def cli() -> None: ...


from . import config, database, process  # noqa: F401, E402
