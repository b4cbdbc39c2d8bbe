"""
Interactive file picker built on prompt_toolkit.

A thin adapter: key presses and query edits are forwarded to a
QuickOpenSession, and the result list is redrawn from the session's
visible set. All filtering and selection logic lives in the session.
"""

from pathlib import Path
from typing import Optional

from prompt_toolkit.application import Application
from prompt_toolkit.buffer import Buffer
from prompt_toolkit.formatted_text import StyleAndTextTuples
from prompt_toolkit.input import Input
from prompt_toolkit.key_binding import KeyBindings, KeyPressEvent
from prompt_toolkit.layout import HSplit, Layout, Window
from prompt_toolkit.layout.controls import FormattedTextControl
from prompt_toolkit.layout.dimension import Dimension
from prompt_toolkit.output import Output
from prompt_toolkit.styles import Style
from prompt_toolkit.widgets import TextArea

from quickopen.core.session import QuickOpenSession

PICKER_STYLE = Style.from_dict({
    "status": "#00aaaa bold",
    "prompt": "#00aa00 bold",
    "name": "#ffffff",
    "directory": "#888888",
    "selected": "reverse",
    "empty": "#aaaa00 italic",
    "hint": "#888888",
})

HINT_TEXT = "Enter: open   Esc: cancel   Up/Down: move"


class FilePicker:
    """
    Inline picker: status line, query line, result list.

    Attributes:
        session: The session being driven.
        max_rows: Maximum result rows drawn at once.
    """

    def __init__(
        self,
        session: QuickOpenSession,
        max_rows: int = 20,
        input: Optional[Input] = None,
        output: Optional[Output] = None,
    ):
        self.session = session
        self.max_rows = max(1, max_rows)
        self._scroll = 0

        self.query_area = TextArea(
            text=session.query,
            multiline=False,
            prompt=[("class:prompt", "> ")],
            focus_on_click=True,
        )
        self.query_area.buffer.on_text_changed += self._on_query_changed

        status = Window(
            FormattedTextControl(lambda: [("class:status", self.session.status_text)]),
            height=1,
        )
        results = Window(
            FormattedTextControl(self._get_result_fragments),
            height=Dimension(min=1, preferred=self.max_rows, max=self.max_rows),
        )
        hint = Window(FormattedTextControl([("class:hint", HINT_TEXT)]), height=1)

        self.app: Application[Optional[Path]] = Application(
            layout=Layout(HSplit([status, self.query_area, results, hint]), focused_element=self.query_area),
            key_bindings=self._create_key_bindings(),
            style=PICKER_STYLE,
            full_screen=False,
            input=input,
            output=output,
        )

    def _on_query_changed(self, buffer: Buffer) -> None:
        self.session.set_query(buffer.text)

    def _create_key_bindings(self) -> KeyBindings:
        kb = KeyBindings()

        @kb.add("enter")
        def _accept(event: KeyPressEvent) -> None:
            # Disabled while nothing is visible
            if not self.session.can_commit:
                return
            event.app.exit(result=self.session.commit())

        @kb.add("escape", eager=True)
        @kb.add("c-c")
        @kb.add("c-g")
        def _cancel(event: KeyPressEvent) -> None:
            self.session.cancel()
            event.app.exit(result=None)

        @kb.add("up")
        @kb.add("c-p")
        @kb.add("s-tab")
        def _previous(event: KeyPressEvent) -> None:
            self.session.move_selection(-1)

        @kb.add("down")
        @kb.add("c-n")
        @kb.add("tab")
        def _next(event: KeyPressEvent) -> None:
            self.session.move_selection(1)

        return kb

    def visible_window(self) -> tuple[int, int]:
        """
        Start and end (exclusive) of the visible rows that fit on screen.

        The window only scrolls when the selection leaves it.
        """
        total = len(self.session.visible)
        selected = self.session.selected_index or 0
        if selected < self._scroll:
            self._scroll = selected
        elif selected >= self._scroll + self.max_rows:
            self._scroll = selected - self.max_rows + 1
        self._scroll = max(0, min(self._scroll, total - self.max_rows))
        return self._scroll, min(total, self._scroll + self.max_rows)

    def _get_result_fragments(self) -> StyleAndTextTuples:
        visible = self.session.visible
        if not visible:
            return [("class:empty", "No matching files")]

        fragments: StyleAndTextTuples = []
        start, end = self.visible_window()
        for i in range(start, end):
            entry = visible[i]
            selected = " class:selected" if i == self.session.selected_index else ""
            if fragments:
                fragments.append(("", "\n"))
            fragments.append(("class:name" + selected, entry.name))
            fragments.append(("class:directory" + selected, f"  {entry.directory}"))
        return fragments

    def run(self) -> Optional[Path]:
        """
        Run until the user commits or cancels.

        Returns:
            The committed path, or None if cancelled.
        """
        return self.app.run()


def run_picker(
    session: QuickOpenSession,
    max_rows: int = 20,
    input: Optional[Input] = None,
    output: Optional[Output] = None,
) -> Optional[Path]:
    """Drive a scanned session through the interactive picker."""
    return FilePicker(session, max_rows=max_rows, input=input, output=output).run()
