"""CLI entrypoint for headless runs and animations.

This module owns argument parsing and subcommand dispatch. Simulation logic
lives in ``epidemic_abm.simulation``; rendering lives in ``epidemic_abm.viz``.
"""

from __future__ import annotations

import argparse
import json
import logging
import random
from dataclasses import asdict
from pathlib import Path

from epidemic_abm.config.constants import (
    HEIGHT,
    INFECTION_DURATION,
    INFECTION_PROBABILITY_PCT,
    INFECTION_PROXIMITY,
    INITIAL_INFECTED_PCT,
    MAX_DISPLACEMENT,
    NORMAL_FATALITY_RATE_PCT,
    NUM_STEPS,
    POPULATION_SIZE,
    SATURATED_FATALITY_RATE_PCT,
    SATURATION_DIVISOR,
    WIDTH,
)
from epidemic_abm.config.types import EpidemicConfig, RunConfig, ScanBackend
from epidemic_abm.domain.status import PolicyFlags
from epidemic_abm.simulation.engine import Simulation
from epidemic_abm.simulation.runner import run_batch, run_simulation
from epidemic_abm.viz.render import render_animation, render_summary_figure
from epidemic_abm.viz.theme import REGISTERED_THEMES, get_theme

# ---------------------------------------------------------------------------
# Coercion helpers
# ---------------------------------------------------------------------------


def _coerce_bool(raw: object, key: str) -> bool:
    """Coerce raw value to bool with strict string-check."""
    if isinstance(raw, bool):
        return raw
    if isinstance(raw, str):
        normalized = raw.strip().lower()
        if normalized in {"1", "true", "yes", "on"}:
            return True
        if normalized in {"0", "false", "no", "off"}:
            return False
    raise ValueError(f"{key} must be a boolean value")


def _coerce_int(raw: object, key: str) -> int:
    """Coerce raw value to int; rejects booleans and non-integer floats."""
    if isinstance(raw, bool):
        raise ValueError(f"{key} must be an integer value")
    if isinstance(raw, float):
        if raw != int(raw):
            raise ValueError(f"{key} must be an integer value, got {raw!r}")
        return int(raw)
    if isinstance(raw, (int, str)):
        try:
            return int(raw)
        except ValueError as exc:
            raise ValueError(f"{key} must be an integer value, got {raw!r}") from exc
    raise ValueError(f"{key} must be an integer value")


def _coerce_float(raw: object, key: str) -> float:
    """Coerce raw value to float; rejects booleans."""
    if isinstance(raw, bool):
        raise ValueError(f"{key} must be a float value")
    if isinstance(raw, (int, float, str)):
        try:
            return float(raw)
        except ValueError as exc:
            raise ValueError(f"{key} must be a float value, got {raw!r}") from exc
    raise ValueError(f"{key} must be a float value")


def _coerce_str(raw: object, key: str) -> str:
    """Coerce raw value to str; rejects booleans."""
    if isinstance(raw, bool):
        raise ValueError(f"{key} must be a string-coercible value")
    if isinstance(raw, (str, Path, int, float)):
        return str(raw)
    raise ValueError(f"{key} must be a string-coercible value")


def _get_val(cli_val: object, key: str, file_cfg: dict[str, object], default: object) -> object:
    """CLI > file > default resolution."""
    if cli_val is not None:
        return cli_val
    return file_cfg.get(key, default)


def _parse_scan_backend(raw: str) -> ScanBackend:
    try:
        return ScanBackend(raw)
    except ValueError as exc:
        valid = ", ".join(backend.value for backend in ScanBackend)
        raise ValueError(f"scan-backend must be one of {valid}") from exc


def _load_config_file(path: Path | None) -> dict[str, object]:
    if path is None:
        return {}
    loaded = json.loads(Path(path).read_text())
    if not isinstance(loaded, dict):
        raise ValueError(f"Config file must hold a JSON object: {path}")
    return loaded


def _build_epidemic_config(
    args: argparse.Namespace, file_cfg: dict[str, object]
) -> EpidemicConfig:
    """Resolve every EpidemicConfig field with CLI > file > default precedence."""

    def get_int(key: str, default: int) -> int:
        return _coerce_int(_get_val(getattr(args, key), key, file_cfg, default), key)

    policy = PolicyFlags.NONE
    if _coerce_bool(_get_val(args.isolation, "isolation", file_cfg, False), "isolation"):
        policy |= PolicyFlags.ISOLATION
    if _coerce_bool(
        _get_val(args.social_distancing, "social_distancing", file_cfg, False),
        "social_distancing",
    ):
        policy |= PolicyFlags.SOCIAL_DISTANCING

    return EpidemicConfig(
        population_size=get_int("population_size", POPULATION_SIZE),
        width=get_int("width", WIDTH),
        height=get_int("height", HEIGHT),
        infection_duration=get_int("infection_duration", INFECTION_DURATION),
        infection_probability_pct=get_int("infection_probability_pct", INFECTION_PROBABILITY_PCT),
        normal_fatality_rate_pct=get_int("normal_fatality_rate_pct", NORMAL_FATALITY_RATE_PCT),
        saturated_fatality_rate_pct=get_int(
            "saturated_fatality_rate_pct", SATURATED_FATALITY_RATE_PCT
        ),
        proximity_threshold=_coerce_float(
            _get_val(
                args.proximity_threshold, "proximity_threshold", file_cfg, INFECTION_PROXIMITY
            ),
            "proximity_threshold",
        ),
        saturation_divisor=get_int("saturation_divisor", SATURATION_DIVISOR),
        initial_infected_pct=get_int("initial_infected_pct", INITIAL_INFECTED_PCT),
        max_displacement=get_int("max_displacement", MAX_DISPLACEMENT),
        policy=policy,
        scan_backend=_parse_scan_backend(
            _coerce_str(
                _get_val(args.scan_backend, "scan_backend", file_cfg, ScanBackend.NUMPY.value),
                "scan_backend",
            )
        ),
    )


# ---------------------------------------------------------------------------
# Parsers
# ---------------------------------------------------------------------------


def _add_common_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="JSON config file (CLI args override file values)",
    )
    parser.add_argument("--population-size", dest="population_size", type=int, default=None)
    parser.add_argument("--width", type=int, default=None)
    parser.add_argument("--height", type=int, default=None)
    parser.add_argument("--infection-duration", dest="infection_duration", type=int, default=None)
    parser.add_argument(
        "--infection-probability-pct", dest="infection_probability_pct", type=int, default=None
    )
    parser.add_argument(
        "--normal-fatality-rate-pct", dest="normal_fatality_rate_pct", type=int, default=None
    )
    parser.add_argument(
        "--saturated-fatality-rate-pct",
        dest="saturated_fatality_rate_pct",
        type=int,
        default=None,
    )
    parser.add_argument(
        "--proximity-threshold", dest="proximity_threshold", type=float, default=None
    )
    parser.add_argument("--saturation-divisor", dest="saturation_divisor", type=int, default=None)
    parser.add_argument(
        "--initial-infected-pct", dest="initial_infected_pct", type=int, default=None
    )
    parser.add_argument("--max-displacement", dest="max_displacement", type=int, default=None)
    parser.add_argument("--isolation", action=argparse.BooleanOptionalAction, default=None)
    parser.add_argument(
        "--social-distancing",
        dest="social_distancing",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Accepted for configuration compatibility; has no effect on movement",
    )
    parser.add_argument(
        "--scan-backend",
        dest="scan_backend",
        type=str,
        choices=[backend.value for backend in ScanBackend],
        default=None,
    )
    parser.add_argument("--steps", type=int, default=None)
    parser.add_argument("--sim-seed", dest="sim_seed", type=int, default=None)
    parser.add_argument(
        "--log-level",
        dest="log_level",
        type=str,
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )


def _build_run_parser(subparsers: argparse._SubParsersAction) -> None:
    p = subparsers.add_parser("run", help="Run seeded headless simulations")
    _add_common_arguments(p)
    p.add_argument("--n-runs", dest="n_runs", type=int, default=None)
    p.add_argument("--out-dir", dest="out_dir", type=Path, default=None)
    p.add_argument("--write-history", action=argparse.BooleanOptionalAction, default=None)
    p.add_argument(
        "--figure",
        type=Path,
        default=None,
        help="Also save a population/history figure of the first run",
    )
    p.add_argument("--theme", type=str, default="default", choices=sorted(REGISTERED_THEMES))


def _build_animate_parser(subparsers: argparse._SubParsersAction) -> None:
    p = subparsers.add_parser("animate", help="Render one simulation as a GIF")
    _add_common_arguments(p)
    p.add_argument("--output", type=Path, required=True)
    p.add_argument("--fps", type=int, default=10)
    p.add_argument("--theme", type=str, default="default", choices=sorted(REGISTERED_THEMES))


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Agent-based epidemic spread simulation")
    subparsers = parser.add_subparsers(dest="command")
    _build_run_parser(subparsers)
    _build_animate_parser(subparsers)
    return parser


# ---------------------------------------------------------------------------
# Handlers
# ---------------------------------------------------------------------------


def _handle_run(args: argparse.Namespace, file_cfg: dict[str, object]) -> dict[str, object]:
    config = _build_epidemic_config(args, file_cfg)
    run_config = RunConfig(
        n_runs=_coerce_int(_get_val(args.n_runs, "n_runs", file_cfg, 1), "n_runs"),
        steps=_coerce_int(_get_val(args.steps, "steps", file_cfg, NUM_STEPS), "steps"),
        sim_seed_start=_coerce_int(_get_val(args.sim_seed, "sim_seed", file_cfg, 0), "sim_seed"),
        out_dir=Path(_coerce_str(_get_val(args.out_dir, "out_dir", file_cfg, "data"), "out_dir")),
        write_history=_coerce_bool(
            _get_val(args.write_history, "write_history", file_cfg, True), "write_history"
        ),
    )
    summaries = run_batch(config, run_config)
    if args.figure is not None:
        # same seed and step cap as the first batch run, so the figure matches its summary
        simulation, _ = run_simulation(
            config, random.Random(run_config.sim_seed_start), run_config.steps
        )
        render_summary_figure(simulation, args.figure, theme=get_theme(args.theme))
    return {
        "mode": "run",
        "total_runs": len(summaries),
        "finished": sum(1 for s in summaries if s.finished),
        "runs": [asdict(s) for s in summaries],
    }


def _handle_animate(args: argparse.Namespace, file_cfg: dict[str, object]) -> dict[str, object]:
    config = _build_epidemic_config(args, file_cfg)
    steps = _coerce_int(_get_val(args.steps, "steps", file_cfg, 200), "steps")
    sim_seed = _coerce_int(_get_val(args.sim_seed, "sim_seed", file_cfg, 0), "sim_seed")
    simulation = Simulation.initialize(config, random.Random(sim_seed))
    output = render_animation(
        simulation, steps, args.output, fps=args.fps, theme=get_theme(args.theme)
    )
    return {
        "mode": "animate",
        "output": str(output),
        "ticks": simulation.tick,
        "finished": simulation.is_finished,
    }


# ---------------------------------------------------------------------------
# Main CLI
# ---------------------------------------------------------------------------


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint.

    Supports ``--config path/to/config.json``. CLI arguments override
    config-file values; config-file values override built-in defaults.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)
    if args.command is None:
        parser.print_help()
        parser.exit(2)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        file_cfg = _load_config_file(args.config)
    except FileNotFoundError:
        parser.error(f"Config file not found: {args.config}")
    except json.JSONDecodeError as exc:
        parser.error(f"Config file is not valid JSON: {args.config}: {exc}")
    except ValueError as exc:
        parser.error(str(exc))

    try:
        if args.command == "run":
            summary = _handle_run(args, file_cfg)
        else:
            summary = _handle_animate(args, file_cfg)
    except ValueError as exc:
        parser.error(str(exc))
    print(json.dumps(summary, ensure_ascii=False, indent=2))


if __name__ == "__main__":
    main()
