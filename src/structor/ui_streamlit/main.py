from __future__ import annotations

import logging
import sys
import time
from pathlib import Path

import streamlit as st
from dotenv import load_dotenv

_SRC_ROOT = Path(__file__).resolve().parents[2]
if str(_SRC_ROOT) not in sys.path:
    sys.path.insert(0, str(_SRC_ROOT))

load_dotenv(_SRC_ROOT.parent / ".env", override=False)

from structor.container import build_services
from structor.domain.errors import StructorError
from structor.domain.models import InputFile, RunStatus
from structor.domain.vector_formats import is_vector_name
from structor.settings import OPENAI_API_KEY

_PROVIDERS = {"OpenAI": "openai", "Mock (offline)": "mock"}
_REFRESH_SECONDS = 1.0


def _init_state() -> None:
    st.session_state.setdefault("services", None)
    st.session_state.setdefault("services_key", None)
    st.session_state.setdefault("api_key", OPENAI_API_KEY)
    st.session_state.setdefault("import_signature", None)


def _get_services(api_key: str, provider: str):
    services_key = (api_key, provider)
    previous = st.session_state["services"]
    if previous is not None and previous["run_controller"].snapshot().is_active:
        return previous
    if previous is None or st.session_state["services_key"] != services_key:
        files = previous["run_controller"].files if previous else []
        services = build_services(api_key, provider=provider)
        if files:
            services["run_controller"].import_files(files)
        st.session_state["services"] = services
        st.session_state["services_key"] = services_key
    return st.session_state["services"]


def _import_uploads(controller, uploads) -> None:
    signature = tuple((upload.name, upload.size) for upload in uploads)
    if signature == st.session_state["import_signature"]:
        return
    selected = [upload for upload in uploads if is_vector_name(upload.name)]
    if not selected:
        st.error("No SVG/EPS/AI files found.")
        return
    controller.import_files(
        InputFile(index=index, name=upload.name, content=upload.getvalue())
        for index, upload in enumerate(selected)
    )
    st.session_state["import_signature"] = signature
    st.success(f"{len(selected)} files imported.")


def main() -> None:
    logging.basicConfig(level=logging.INFO)
    st.set_page_config(page_title="File Name Structor", layout="wide")
    _init_state()
    st.title("File Name Structor")

    cols = st.columns([1, 3])
    provider_label = cols[0].selectbox("AI", list(_PROVIDERS.keys()))
    api_key = cols[1].text_input(
        "API Key",
        value=st.session_state.get("api_key", ""),
        type="password",
    )
    st.session_state["api_key"] = api_key
    provider = _PROVIDERS[provider_label]
    if provider == "mock" and not api_key:
        api_key = "offline"

    try:
        services = _get_services(api_key, provider)
    except (ValueError, StructorError) as exc:
        st.error(str(exc))
        return
    controller = services["run_controller"]
    export_service = services["export_service"]

    uploads = st.file_uploader(
        "Input files",
        type=["svg", "eps", "ai"],
        accept_multiple_files=True,
    )
    if uploads:
        try:
            _import_uploads(controller, uploads)
        except StructorError as exc:
            st.error(f"Import failed: {exc}")

    state = controller.snapshot()
    st.write(f"**{state.processed_count}** / {state.total} files renamed - {state.progress}%")
    st.progress(state.progress / 100)

    buttons = st.columns(3)
    if not state.is_active:
        if buttons[0].button("Start Structor"):
            started = False
            try:
                controller.start_in_background()
                started = True
            except StructorError as exc:
                st.error(str(exc))
            if started:
                st.rerun()
    elif buttons[0].button("Stop"):
        controller.stop()
        st.rerun()

    pause_label = "Resume" if state.status is RunStatus.PAUSED else "Pause"
    if buttons[1].button(pause_label, disabled=not state.is_active):
        controller.toggle_pause()
        st.rerun()

    names = controller.names()
    files = controller.files
    if names:
        try:
            archive = export_service.export(files, names)
            buttons[2].download_button(
                "Export ZIP",
                data=archive.data,
                file_name=archive.filename,
                mime="application/zip",
            )
        except StructorError as exc:
            st.error(str(exc))
    else:
        buttons[2].button("Export ZIP", disabled=True)

    if state.status is RunStatus.COMPLETED:
        st.success("Processing finished.")

    st.subheader("Files")
    if not files:
        st.info("No files imported yet.")
    for file in files:
        row = st.columns([4, 4, 1, 1])
        row[0].write(f"Old: {file.name}")
        new_name = names.get(file.index)
        row[1].write(f"New: {new_name}.{file.extension}" if new_name else "New: -")
        if file.index in state.failures:
            row[1].caption(f"Rename failed for {file.name}; used a placeholder.")
        if row[2].button("Regenerate", key=f"regenerate_{file.index}", disabled=state.is_active):
            try:
                outcome = controller.regenerate(file.index)
            except StructorError as exc:
                st.error(str(exc))
            else:
                if outcome.ok:
                    st.rerun()
                st.error(f"Rename failed for {file.name}")
        row[3].caption(f"{file.index + 1}/{len(files)}")

    if state.is_active:
        time.sleep(_REFRESH_SECONDS)
        st.rerun()


if __name__ == "__main__":
    main()
