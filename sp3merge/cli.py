#!filepath: sp3merge/cli.py
from pathlib import Path
from typing import List

import typer
from rich import print
from rich.markup import escape
from rich.table import Table

from sp3merge import __version__
from sp3merge.config.app_config import AppConfig
from sp3merge.dataloader.sp3_reader import Sp3Reader
from sp3merge.utils.errors import Sp3MergeError
from sp3merge.workflows.merge_workflow import run_merge

app = typer.Typer(help="SP3 ephemeris merge CLI")


def _fail(e: Exception):
    print(f"[red]error:[/red] {escape(str(e))}")
    raise typer.Exit(code=1)


@app.command()
def version():
    print(f"sp3merge v{__version__}")


@app.command()
def merge(config: Path = typer.Argument(..., help="YAML config (measurementFiles / outputFileName)")):
    """
    合并配置中列出的 SP3 文件，写出单一 SP3 文件
    """
    try:
        cfg = AppConfig.load(config)
        ctx = run_merge(cfg)
    except Sp3MergeError as e:
        _fail(e)

    print(
        f"[green]Merged {len(ctx.input_files)} files → {escape(str(ctx.output_file))} "
        f"({ctx.written_epochs} epochs, {escape(ctx.object_id)})[/green]"
    )


@app.command()
def inspect(files: List[Path] = typer.Argument(..., help="SP3 files (.sp3 / .gz / .Z)")):
    """
    打印 SP3 文件中每颗卫星的 sample 数与时间跨度（不合并）
    """
    reader = Sp3Reader()

    table = Table(title="SP3 inputs")
    for col in ("file", "object", "frame", "time", "samples", "start", "stop"):
        table.add_column(col)

    try:
        for f in files:
            doc = reader.read(f)
            for object_id, eph in doc.ephemerides.items():
                table.add_row(
                    doc.source,
                    object_id,
                    eph.frame,
                    eph.time_system,
                    str(len(eph)),
                    str(eph.start or "-"),
                    str(eph.stop or "-"),
                )
    except Sp3MergeError as e:
        _fail(e)

    print(table)


if __name__ == "__main__":
    app()

# python -m sp3merge.cli merge sp3merge/config/base.yml
