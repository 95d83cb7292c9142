"""Command line entry point for kuberviz."""

from __future__ import annotations

import logging
from pathlib import Path

import click
import yaml

from kuberviz.models.errors import ListFormatError, PatternError
from kuberviz.models.state import AppSettings, AppState, ConfigLoadError, ConfigManager
from kuberviz.utils.sample_data import sample_nodes, sample_pods

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(name)-12s %(levelname)-8s %(message)s"
_STDERR_LEVELS = (logging.WARNING, logging.INFO, logging.DEBUG)


def configure_logging(verbose: int, log_file: Path | None) -> None:
    """Configure the root logger once.

    A log file records INFO and above, or DEBUG with ``-v``. The TUI owns
    the terminal, so stderr gets WARNING by default, INFO with ``-v`` and
    DEBUG with ``-vv``.
    """
    if log_file is not None:
        handler: logging.Handler = logging.FileHandler(log_file, encoding="utf-8")
        level = logging.DEBUG if verbose else logging.INFO
    else:
        handler = logging.StreamHandler()
        level = _STDERR_LEVELS[min(verbose, len(_STDERR_LEVELS) - 1)]
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root = logging.getLogger()
    root.handlers[:] = [handler]
    root.setLevel(level)


def _load_settings(no_config: bool) -> AppSettings:
    if no_config:
        return AppSettings()
    try:
        return ConfigManager.load()
    except ConfigLoadError as exc:
        click.echo(f"warning: {exc}, using defaults", err=True)
        return AppSettings()


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.option("--nodes", "nodes_path", type=click.Path(exists=True, dir_okay=False, path_type=Path),
              help="Node list exported with 'kubectl get nodes -o json'.")
@click.option("--pods", "pods_path", type=click.Path(exists=True, dir_okay=False, path_type=Path),
              help="Pod list exported with 'kubectl get pods -A -o json'.")
@click.option("--sample", is_flag=True, help="Show the built-in sample cluster.")
@click.option("--memory-x", is_flag=True, help="Put memory on the horizontal axis.")
@click.option("--scale", "scale_unit", type=float, default=None, help="Cells per CPU core / GiB.")
@click.option("--system", "ns_group_system", default=None, help="Regex for system namespaces.")
@click.option("--infra", "ns_group_infra", default=None, help="Regex for infra namespaces.")
@click.option("--prod", "ns_group_prod", default=None, help="Regex for prod namespaces.")
@click.option("--node-filter", default=None, help="Only show nodes matching this regex.")
@click.option("--dump", is_flag=True, help="Print layouts as YAML instead of starting the TUI.")
@click.option("--no-config", is_flag=True, help="Ignore and do not write the settings file.")
@click.option("-v", "--verbose", count=True, help="Increase log verbosity (-v info, -vv debug on stderr).")
@click.option("--log-file", type=click.Path(dir_okay=False, path_type=Path), default=None,
              help="Write logs to this file.")
def main(
    nodes_path: Path | None,
    pods_path: Path | None,
    sample: bool,
    memory_x: bool,
    scale_unit: float | None,
    ns_group_system: str | None,
    ns_group_infra: str | None,
    ns_group_prod: str | None,
    node_filter: str | None,
    dump: bool,
    no_config: bool,
    verbose: int,
    log_file: Path | None,
) -> None:
    """Visualize how pods consume node CPU and memory capacity."""
    configure_logging(verbose, log_file)

    state = AppState(settings=_load_settings(no_config))
    patterns = {
        name: value
        for name, value in (
            ("ns_group_system", ns_group_system),
            ("ns_group_infra", ns_group_infra),
            ("ns_group_prod", ns_group_prod),
            ("node_filter", node_filter),
        )
        if value is not None
    }
    try:
        state = state.update_patterns(**patterns)
    except PatternError as exc:
        option = exc.field.removeprefix("ns_group_").replace("_", "-")
        raise click.BadParameter(str(exc), param_hint=f"--{option}") from exc
    if memory_x:
        state = state.with_orientation(False)
    if scale_unit is not None:
        state = state.with_scale_unit(scale_unit)

    if dump:
        if sample:
            nodes, pods = sample_nodes(), sample_pods(deterministic=True)
        else:
            from kuberviz.controllers.cluster import ClusterController

            try:
                data = ClusterController(nodes_path, pods_path).load_all()
            except ListFormatError as exc:
                raise click.ClickException(str(exc)) from exc
            nodes, pods = data.nodes, data.pods
        result = state.with_cluster(nodes, pods).render()
        click.echo(yaml.safe_dump(result.to_dict(), sort_keys=False), nl=False)
        return

    from kuberviz.app import KubervizApp

    app = KubervizApp(
        nodes_path=nodes_path,
        pods_path=pods_path,
        sample=sample,
        settings=state.settings,
        persist_settings=not no_config,
    )
    app.run()


if __name__ == "__main__":
    main()
