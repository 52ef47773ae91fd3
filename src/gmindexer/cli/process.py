import pathlib

import click
import tqdm
from pydantic import ValidationError

from gmindexer.archive import load_blocks_from_file
from gmindexer.cli import cli
from gmindexer.config import settings
from gmindexer.database.operations import create_new_sqlite_database, get_scoped_sqlite_session
from gmindexer.exceptions import NormalizationError
from gmindexer.logging import logger
from gmindexer.processor import process_batch


@cli.command("process")
@click.argument(
    "batch_files",
    nargs=-1,
    required=True,
    type=click.Path(exists=True, dir_okay=False, path_type=pathlib.Path),
)
@click.option(
    "--database",
    "database_path",
    type=click.Path(dir_okay=False, path_type=pathlib.Path),
    default=None,
    help="Database to write to, overriding the configured path",
)
@click.option(
    "--no-progress",
    is_flag=True,
    default=False,
    help="Disable progress bar",
)
def process(
    *,
    batch_files: tuple[pathlib.Path, ...],
    database_path: pathlib.Path | None,
    no_progress: bool,
) -> None:
    """
    Normalize and store archive batch files.

    Each file is processed as one batch and committed before the next file is read. A batch that
    fails to normalize is rolled back and processing stops.
    """

    if database_path is None:
        database_path = settings.database.path
    if not database_path.exists():
        create_new_sqlite_database(database_path)

    db_session = get_scoped_sqlite_session(database_path)

    with db_session() as session:
        for batch_file in tqdm.tqdm(
            batch_files,
            desc="Processing batches",
            bar_format="{desc} {percentage:3.1f}% |{bar}|",
            leave=False,
            disable=no_progress,
        ):
            try:
                blocks = load_blocks_from_file(batch_file)
            except ValidationError as exc:
                msg = f"{batch_file} is not a valid archive export:\n{exc}"
                raise click.ClickException(msg) from exc

            try:
                parsed_events = process_batch(
                    session,
                    blocks,
                    ss58_prefix=settings.chain.ss58_prefix,
                )
            except NormalizationError as exc:
                session.rollback()
                logger.exception(f"Processing failed on batch {batch_file}")
                msg = f"Batch {batch_file} was not stored: {exc}"
                raise click.ClickException(msg) from exc

            session.commit()
            click.echo(f"{batch_file}: {parsed_events}")

    db_session.remove()
