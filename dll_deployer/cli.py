"""CLI entry point: deploy-dll.

    deploy-dll build/app.exe --cmake-prefix-path C:/Qt/6.6.0/mingw_64
    deploy-dll build/app.exe --deep-search-dir C:/msys64/mingw64 --allow-missing
"""

from __future__ import annotations

import os
import sys

import click
import structlog

from dll_deployer import __version__
from dll_deployer.core.logging import setup_logging
from dll_deployer.deployer import DllDeployer
from dll_deployer.exceptions import DeployerError
from dll_deployer.models.config import OBJDUMP_AUTO, DeployConfig
from dll_deployer.models.report import DeployReport
from dll_deployer.objdump.locator import resolve_objdump
from dll_deployer.objdump.runner import ObjdumpInspector

log = structlog.get_logger("dll_deployer.cli")

_DEFAULT_OBJDUMP = os.environ.get("DLL_DEPLOYER_OBJDUMP", OBJDUMP_AUTO)


@click.command(help="Deploy dll for exe or dll.")
@click.version_option(__version__, prog_name="deploy-dll")
@click.argument("binary_file")
@click.option("--skip-env-path", is_flag=True, help="Do not search in system variable PATH")
@click.option(
    "--copy-vc-redist", is_flag=True, help="Copy Microsoft Visual C/C++ redistributable dlls."
)
@click.option("--verbose", is_flag=True, help="Show verbose information during execution")
@click.option("--shallow-search-dir", multiple=True, help="Search for dll in those dirs")
@click.option("--no-shallow-search", is_flag=True, help="Disable shallow search")
@click.option(
    "--deep-search-dir", multiple=True, help="Search for dll recursively in those dirs"
)
@click.option("--no-deep-search", is_flag=True, help="Disable recursive search")
@click.option(
    "--cmake-prefix-path", multiple=True, help="CMAKE_PREFIX_PATH for cmake to search for packages"
)
@click.option("--ignore", multiple=True, help="Dll files that won't be deployed")
@click.option(
    "--objdump-file",
    default=_DEFAULT_OBJDUMP,
    show_default=True,
    help="Location of objdump. Valid values: [auto] [system] [builtin] path",
)
@click.option(
    "--allow-missing", is_flag=True, help="If one or more dll failed to be found, skip it and go on"
)
def main(
    binary_file: str,
    skip_env_path: bool,
    copy_vc_redist: bool,
    verbose: bool,
    shallow_search_dir: tuple[str, ...],
    no_shallow_search: bool,
    deep_search_dir: tuple[str, ...],
    no_deep_search: bool,
    cmake_prefix_path: tuple[str, ...],
    ignore: tuple[str, ...],
    objdump_file: str,
    allow_missing: bool,
) -> None:
    setup_logging(verbose=verbose)
    try:
        config = DeployConfig.from_cli(
            binary_file,
            shallow_search_dir=shallow_search_dir,
            deep_search_dir=deep_search_dir,
            cmake_prefix_path=cmake_prefix_path,
            ignore=ignore,
            skip_env_path=skip_env_path,
            copy_vc_redist=copy_vc_redist,
            no_shallow_search=no_shallow_search,
            no_deep_search=no_deep_search,
            allow_missing=allow_missing,
            verbose=verbose,
            objdump_file=objdump_file,
        )
        objdump = resolve_objdump(config.objdump_file)
        log.debug("cli.objdump", path=objdump)

        report = DllDeployer(config, ObjdumpInspector(objdump)).run()
    except DeployerError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(e.exit_code)

    _print_summary(report)


def _print_summary(report: DeployReport) -> None:
    click.echo(f"Binary format: {report.binary_format}")
    click.echo(f"Copied {len(report.copied)} dll(s)")
    for name, source in report.copied:
        click.echo(f"  + {name}  ({source})")
    if report.missing:
        click.echo(f"Missing {len(report.missing)} dll(s)")
        for name, required_by in report.missing:
            click.echo(f'  ! {name}  required by "{required_by}"')


if __name__ == "__main__":
    main()
