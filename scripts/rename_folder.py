from __future__ import annotations

import argparse
import logging
import os
from pathlib import Path

from dotenv import load_dotenv

_REPO_ROOT = Path(__file__).resolve().parents[1]
load_dotenv(_REPO_ROOT / ".env", override=False)

from structor.container import build_services
from structor.domain.errors import StructorError
from structor.domain.models import RunState


def _parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Name every SVG/EPS/AI file in a folder and package the results as a ZIP."
    )
    parser.add_argument("folder", help="Folder containing vector files.")
    parser.add_argument("--out", default=".", help="Directory for the ZIP archive.")
    parser.add_argument(
        "--provider",
        default=os.getenv("NAMING_PROVIDER", "mock"),
        help="Naming provider: openai or mock.",
    )
    parser.add_argument("--recursive", action="store_true", help="Include subfolders.")
    parser.add_argument("--verbose", action="store_true", help="Log debug output.")
    return parser.parse_args()


def _print_progress(state: RunState) -> None:
    print(f"{state.processed_count} / {state.total} files renamed - {state.progress}%")


def main() -> None:
    args = _parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    api_key = os.getenv("OPENAI_API_KEY", "")
    if args.provider.lower() == "mock" and not api_key:
        api_key = "offline"

    try:
        services = build_services(api_key, provider=args.provider, on_progress=_print_progress)
    except ValueError as exc:
        raise SystemExit(str(exc)) from exc
    controller = services["run_controller"]
    export_service = services["export_service"]

    try:
        files = services["folder_source"].list_vector_files(args.folder, recursive=args.recursive)
        controller.import_files(files)
        controller.start()
        state = controller.run()
    except StructorError as exc:
        raise SystemExit(str(exc)) from exc
    except KeyboardInterrupt:
        controller.stop()
        state = controller.snapshot()

    names = controller.names()
    for file in controller.files:
        new_name = names.get(file.index)
        marker = " (fallback)" if file.index in state.failures else ""
        print(f"{file.name} -> {new_name}.{file.extension}{marker}" if new_name else f"{file.name} -> -")

    try:
        path = export_service.write_archive(controller.files, names, args.out)
    except StructorError as exc:
        raise SystemExit(str(exc)) from exc
    print(f"Status: {state.status.value}. Archive written to {path}")


if __name__ == "__main__":
    main()
