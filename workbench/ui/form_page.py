"""NiceGUI form for sending text and documents to an assistant."""

from nicegui import events, ui

from workbench.assistant.client import get_conversation_client
from workbench.assistant.config import get_workbench_config
from workbench.models.schemas import WorkflowState
from workbench.workflow.orchestrator import PROCESSING_PLACEHOLDER, Workflow

ACCEPTED_FILES = ".txt,.doc,.docx"

CUSTOM_CSS = """
<link href="https://fonts.googleapis.com/css2?family=Inter:wght@400;500;600&display=swap"
      rel="stylesheet">
<style>
    * { font-family: 'Inter', sans-serif; }

    body { background: #f9fafb; min-height: 100vh; }

    .panel {
        background: white;
        border: 1px solid #d1d5db;
        border-radius: 8px;
        height: 24rem;
        overflow: auto;
    }

    .process-btn { background: #1B4D5C !important; color: white !important; }
    .process-btn:hover { background: #153e4a !important; }

    .result-text { white-space: pre-wrap; }
</style>
"""


async def attach_upload(
    workflow: Workflow, upload: ui.upload, e: events.UploadEventArguments
) -> None:
    """Append an uploaded file to the input buffer and clear the picker.

    Uploaded entries count against the picker's file list, so it is emptied
    after every upload to let the next selection through.
    """
    data = await e.file.read()
    workflow.attach_file(e.file.name, e.file.content_type, data)
    upload.reset()


@ui.page("/")
def form_page() -> None:
    """Main form page."""
    ui.add_head_html(CUSTOM_CSS)
    workflow = Workflow(get_workbench_config(), get_conversation_client())

    upload: ui.upload

    async def handle_upload(e: events.UploadEventArguments) -> None:
        await attach_upload(workflow, upload, e)

    async def process() -> None:
        await workflow.process()
        if workflow.state == WorkflowState.FAILED:
            ui.notify(workflow.result, type="negative")

    def reset() -> None:
        workflow.reset()
        upload.reset()

    # === UI Layout ===
    with ui.column().classes("w-full max-w-7xl mx-auto py-12 px-4 gap-6"):
        ui.label().bind_text_from(
            workflow, "selected_assistant", lambda a: a.description
        ).classes("text-3xl font-semibold text-gray-900")

        ui.select(
            {option.id: option.name for option in workflow.options},
            value=workflow.selected_assistant.id,
            label="Select Your Usecase",
            on_change=lambda e: workflow.select_assistant(e.value),
        ).classes("w-full")

        with ui.grid(columns=2).classes("w-full gap-8"):
            # Input
            with ui.column().classes("w-full gap-4"):
                ui.label("Input").classes("text-xl font-medium text-gray-900")
                ui.textarea(placeholder="Paste text here").bind_value(
                    workflow, "input_buffer"
                ).props("outlined input-style='height: 20rem'").classes("w-full")

                with ui.row().classes("items-center gap-2 text-gray-600"):
                    ui.icon("attach_file")
                    ui.label().bind_text_from(
                        workflow, "selected_file", lambda f: f or "Attach a file"
                    )
                upload = (
                    ui.upload(on_upload=handle_upload, auto_upload=True)
                    .props(f'accept="{ACCEPTED_FILES}" flat bordered')
                    .classes("w-full")
                )

                with ui.row().classes("gap-4"):
                    ui.button("Process", on_click=process).bind_enabled_from(
                        workflow, "can_process"
                    ).bind_text_from(
                        workflow,
                        "is_busy",
                        lambda busy: PROCESSING_PLACEHOLDER if busy else "Process",
                    ).props("unelevated").classes("process-btn px-6")
                    ui.button("Reset", on_click=reset).props("outline color=grey-8")

            # Result
            with ui.column().classes("w-full gap-4"):
                ui.label("Result").classes("text-xl font-medium text-gray-900")
                with ui.element("div").classes("panel w-full p-4"):
                    ui.label().bind_text_from(workflow, "result").bind_visibility_from(
                        workflow, "result", lambda r: bool(r)
                    ).classes("result-text")
                    ui.label("Results will appear here").bind_visibility_from(
                        workflow, "result", lambda r: not r
                    ).classes("w-full h-full text-center text-gray-400")

