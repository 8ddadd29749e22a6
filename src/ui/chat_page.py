"""NiceGUI chat interface for the analytics agent."""

import logging

from nicegui import ui

from src.client.analytics_client import AnalyticsClient
from src.models.schemas import Message, MessageType, TableResult, Visualization
from src.transcript.controller import EXAMPLE_QUESTIONS, TranscriptController
from src.visualization.charts import build_figure, visualization_table
from src.visualization.export import (
    CSV_FILENAME,
    CSV_MEDIA_TYPE,
    grid_columns,
    table_to_csv,
)

logger = logging.getLogger(__name__)

APP_TITLE = "AI Data Agent"

# Enter alone submits; Shift+Enter inserts a newline
SUBMIT_KEY_EVENT = "keydown.enter.exact.prevent"

CUSTOM_CSS = """
<link href="https://fonts.googleapis.com/css2?family=Inter:wght@400;500;600;800&display=swap"
      rel="stylesheet">
<style>
    * { font-family: 'Inter', sans-serif; }

    body { background: linear-gradient(135deg, #f3f4f6 0%, #eff6ff 50%, #e5e7eb 100%); }

    .header { background: rgba(255, 255, 255, 0.8); backdrop-filter: blur(6px); }

    .message-user {
        background: #2563eb;
        color: white;
        border-radius: 18px 18px 4px 18px;
    }

    .message-assistant {
        background: white;
        color: #1f2937;
        border: 1px solid #f3f4f6;
        border-radius: 18px 18px 18px 4px;
    }

    .message-error {
        background: #fee2e2;
        color: #7f1d1d;
        border: 1px solid #fecaca;
        border-radius: 18px;
    }

    .example-card { border: 1px solid #e5e7eb; border-radius: 12px; }
    .example-card:hover { color: #1d4ed8; }

    .input-box {
        background: white;
        border: 1px solid #e5e7eb;
        border-radius: 12px;
        transition: border-color 0.2s;
    }
    .input-box:focus-within { border-color: #2563eb; }
</style>
"""

_BUBBLE_CLASSES = {
    MessageType.USER: "message-user",
    MessageType.ASSISTANT: "message-assistant",
    MessageType.ERROR: "message-error",
}


def render_visualization(viz: Visualization) -> None:
    """Render one visualization; unknown types render nothing."""
    fig = build_figure(viz)
    if fig is not None:
        with ui.card().classes("w-full p-4"):
            ui.plotly(fig).classes("w-full h-64")
        return

    table = visualization_table(viz)
    if table is None:
        return
    with ui.card().classes("w-full p-4 overflow-x-auto"):
        ui.label(viz.title).classes("text-lg font-medium")
        ui.table(columns=grid_columns(table.columns), rows=table.rows).props(
            "flat dense"
        ).classes("w-full")


def download_csv(table: TableResult) -> None:
    """Send the result table to the browser as a CSV file."""
    ui.download.content(table_to_csv(table), CSV_FILENAME, CSV_MEDIA_TYPE)
    logger.info(f"Exported {len(table.rows)} rows to {CSV_FILENAME}")


def render_results_table(table: TableResult | None) -> None:
    """Render the raw query result with a CSV export button."""
    if table is None or not table.has_rows:
        return

    with ui.card().classes("w-full mt-4 p-4 overflow-x-auto"):
        with ui.row().classes("w-full items-center justify-between"):
            ui.label("Query Results").classes("text-lg font-medium")
            ui.button("Export CSV", icon="download", on_click=lambda: download_csv(table)).props(
                "flat dense no-caps color=primary"
            )
        ui.table(columns=grid_columns(table.columns), rows=table.rows).props(
            "flat dense separator=horizontal"
        ).classes("w-full")


def render_message(msg: Message) -> None:
    is_user = msg.type == MessageType.USER
    align = "justify-end" if is_user else "justify-start"
    width = "max-w-[70%]" if is_user else "w-full max-w-3xl"

    with ui.row().classes(f"w-full {align}"):
        with ui.column().classes(f"{width} px-5 py-4 gap-2 {_BUBBLE_CLASSES[msg.type]}"):
            ui.label(msg.content).classes("text-base leading-relaxed whitespace-pre-line")

            if msg.sql_query:
                with ui.column().classes("w-full gap-1 mt-2"):
                    ui.label("Generated SQL:").classes("text-xs text-gray-500 font-semibold")
                    ui.code(msg.sql_query, language="sql").classes("w-full text-xs")

            if msg.visualizations:
                with ui.column().classes("w-full gap-4 mt-2"):
                    for viz in msg.visualizations:
                        render_visualization(viz)

            render_results_table(msg.table_data)


@ui.page("/")
def chat_page() -> None:
    """Main chat page."""
    ui.add_head_html(CUSTOM_CSS)
    controller = TranscriptController(AnalyticsClient())

    def on_message(msg: Message) -> None:
        welcome.set_visibility(False)
        with messages_container:
            render_message(msg)
        scroll_area.scroll_to(percent=1.0)

    async def send_message() -> None:
        reply = await controller.submit()
        if reply is not None and reply.type == MessageType.ERROR:
            ui.notify(controller.error, type="negative")

    controller.subscribe(on_message)

    # === UI Layout ===
    with ui.row().classes("w-full header px-6 py-4 items-center justify-between border-b"):
        with ui.row().classes("items-center gap-2"):
            ui.icon("bar_chart").classes("text-blue-600 text-3xl")
            ui.label(APP_TITLE).classes("text-3xl font-extrabold text-blue-800")
        with ui.row().classes("items-center gap-2"):
            ui.icon("circle").classes("text-green-500 text-xs").bind_visibility_from(
                controller, "connected"
            )
            ui.icon("circle").classes("text-red-500 text-xs").bind_visibility_from(
                controller, "connected", backward=lambda c: not c
            )
            ui.label().bind_text_from(
                controller, "connected", lambda c: "Connected" if c else "Disconnected"
            ).classes("text-sm text-gray-600")

    with ui.column().classes("w-full max-w-7xl mx-auto px-4 gap-4").style(
        "height: calc(100vh - 5rem)"
    ):
        with ui.scroll_area().classes("flex-grow w-full") as scroll_area:
            # Welcome
            with ui.column().classes("w-full items-center py-16 gap-4") as welcome:
                ui.label(f"Welcome to {APP_TITLE}").classes(
                    "text-4xl font-extrabold text-blue-900"
                )
                ui.label(
                    "Ask complex business questions about your data and get instant insights."
                ).classes("text-lg text-gray-600")
                ui.label("Try asking:").classes("text-xl font-semibold mt-8")
                with ui.grid(columns=3).classes("max-w-4xl gap-6"):
                    for question in EXAMPLE_QUESTIONS:
                        with ui.card().classes("example-card cursor-pointer p-5").on(
                            "click", lambda q=question: controller.use_example(q)
                        ):
                            ui.label(question).classes("text-gray-800")

            # Messages
            messages_container = ui.column().classes("w-full gap-6")

            # Loading placeholder
            with ui.column().classes(
                "w-full max-w-3xl message-assistant px-5 py-4 gap-2 animate-pulse"
            ).bind_visibility_from(controller, "is_loading"):
                for width in ("w-3/4", "w-1/2", "w-1/4"):
                    ui.element("div").classes(f"h-4 bg-gray-200 rounded {width}")

        # Error banner
        ui.label().bind_text_from(controller, "error", lambda e: e or "").bind_visibility_from(
            controller, "error", backward=bool
        ).classes("w-full p-3 bg-red-50 border border-red-200 text-red-700 rounded-lg")

        # Input
        with ui.row().classes("w-full pb-4 gap-2 items-end"):
            with ui.element("div").classes("flex-grow input-box px-3 py-2"):
                (
                    ui.textarea(placeholder="Ask a business question...")
                    .props("autogrow borderless dense rows=1")
                    .classes("w-full")
                    .bind_value(controller, "draft")
                    .bind_enabled_from(controller, "is_loading", backward=lambda busy: not busy)
                    .on(SUBMIT_KEY_EVENT, send_message)
                )
            (
                ui.button(icon="arrow_upward", on_click=send_message)
                .props("round unelevated color=primary")
                .bind_enabled_from(controller, "is_loading", backward=lambda busy: not busy)
            )


def main() -> None:
    ui.run(title=APP_TITLE, port=8080, reload=False)


if __name__ == "__main__":
    main()
