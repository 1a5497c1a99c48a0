"""Tests for the interactive keystroke loop."""

from __future__ import annotations

import asyncio
import threading

import pytest
import readchar

from rich_table_prompt import (
    EmptyPromptError,
    ListPrompt,
    NotInteractiveError,
    PromptCancelledError,
    SelectionMode,
    TableMultiSelectionPrompt,
    TableSelectionPrompt,
)

ENTER = readchar.key.ENTER
DOWN = readchar.key.DOWN
UP = readchar.key.UP
SPACE = " "


def _fruits(prompt):
    prompt.add_choices("Apple", "Banana", "Grape")
    return prompt


class TestSingleSelect:
    def test_moves_and_submits(self, terminal_console, press_keys):
        press_keys([DOWN, ENTER])
        assert _fruits(TableSelectionPrompt()).show(terminal_console) == "Banana"

    def test_starts_on_first_leaf_and_ignores_groups(self, terminal_console, press_keys):
        prompt = TableSelectionPrompt()
        prompt.add_choice_group("Berries", ["Blueberry", "Mulberry"])
        prompt.add_choices("Apple")
        press_keys([UP, ENTER])
        assert prompt.show(terminal_console) == "Blueberry"

    def test_wrap_around(self, terminal_console, press_keys):
        press_keys([UP, ENTER])
        assert _fruits(TableSelectionPrompt(wrap_around=True)).show(terminal_console) == "Grape"

    def test_search_jumps_to_match(self, terminal_console, press_keys):
        press_keys(["g", "r", ENTER])
        prompt = _fruits(TableSelectionPrompt(search_enabled=True))
        assert prompt.show(terminal_console) == "Grape"

    def test_search_uses_column_text(self, terminal_console, press_keys):
        prompt = TableSelectionPrompt(search_enabled=True)
        prompt.add_column("Code", lambda fruit: fruit["code"])
        prompt.add_choices({"code": "APL"}, {"code": "BAN"})
        press_keys(["b", ENTER])
        assert prompt.show(terminal_console) == {"code": "BAN"}

    def test_independent_mode_can_choose_group(self, terminal_console, press_keys):
        prompt = TableSelectionPrompt(mode=SelectionMode.INDEPENDENT)
        prompt.add_choice_group("Berries", ["Blueberry"])
        press_keys([ENTER])
        assert prompt.show(terminal_console) == "Berries"

    def test_output_drawn_on_console(self, terminal_console, press_keys):
        press_keys([ENTER])
        _fruits(TableSelectionPrompt(title="Pick a fruit")).show(terminal_console)
        assert "Pick a fruit" in terminal_console.file.getvalue()


class TestMultiSelect:
    def test_required_blocks_until_something_selected(self, terminal_console, press_keys):
        press_keys([ENTER, SPACE, DOWN, DOWN, SPACE, ENTER])
        prompt = _fruits(TableMultiSelectionPrompt())
        assert prompt.show(terminal_console) == ["Apple", "Grape"]

    def test_optional_allows_empty_result(self, terminal_console, press_keys):
        press_keys([ENTER])
        assert _fruits(TableMultiSelectionPrompt(required=False)).show(terminal_console) == []

    def test_group_toggle_returns_leaves(self, terminal_console, berries_prompt, press_keys):
        press_keys([SPACE, ENTER])
        assert berries_prompt.show(terminal_console) == ["Blueberry", "Mulberry"]

    def test_preselected_values_returned(self, terminal_console, berries_prompt, press_keys):
        berries_prompt.select("Cherry")
        press_keys([ENTER])
        assert berries_prompt.show(terminal_console) == ["Cherry"]


class TestErrors:
    def test_non_terminal_console_rejected(self, make_console):
        prompt = _fruits(TableSelectionPrompt())
        with pytest.raises(NotInteractiveError):
            prompt.show(make_console(terminal=False))

    def test_empty_prompt_rejected(self, terminal_console):
        with pytest.raises(EmptyPromptError):
            TableMultiSelectionPrompt().show(terminal_console)

    def test_cancel_event_stops_between_keys(self, terminal_console, monkeypatch):
        prompt = _fruits(TableSelectionPrompt())
        prompt._ensure_columns()
        cancel = threading.Event()

        def _readkey():
            cancel.set()
            return DOWN

        monkeypatch.setattr(readchar, "readkey", _readkey)
        with pytest.raises(PromptCancelledError):
            ListPrompt(terminal_console, prompt).show(
                prompt.tree,
                prompt.mode,
                skip_unselectable=True,
                search_enabled=False,
                page_size=prompt.page_size,
                wrap_around=False,
                cancel_event=cancel,
            )

    def test_keyboard_interrupt_propagates(self, terminal_console, monkeypatch):
        def _interrupt():
            raise KeyboardInterrupt

        monkeypatch.setattr(readchar, "readkey", _interrupt)
        with pytest.raises(KeyboardInterrupt):
            _fruits(TableSelectionPrompt()).show(terminal_console)


class TestAsync:
    def test_show_async_returns_result(self, terminal_console, press_keys):
        press_keys([DOWN, DOWN, ENTER])
        prompt = _fruits(TableSelectionPrompt())
        assert asyncio.run(prompt.show_async(terminal_console)) == "Grape"

    def test_show_async_multi(self, terminal_console, press_keys):
        press_keys([SPACE, ENTER])
        prompt = _fruits(TableMultiSelectionPrompt())
        assert asyncio.run(prompt.show_async(terminal_console)) == ["Apple"]

    def test_cancelling_task_stops_worker_at_next_key(self, terminal_console, monkeypatch):
        prompt = _fruits(TableSelectionPrompt())
        reading = threading.Event()
        release = threading.Event()
        worker_errors = []

        def _blocking_readkey():
            if reading.is_set():
                raise AssertionError("Prompt kept reading after cancellation")
            reading.set()
            release.wait(5)
            return DOWN

        show = prompt._show

        def _recording_show(console, cancel_event):
            try:
                return show(console, cancel_event)
            except PromptCancelledError as e:
                worker_errors.append(e)
                raise

        monkeypatch.setattr(readchar, "readkey", _blocking_readkey)
        monkeypatch.setattr(prompt, "_show", _recording_show)

        async def _cancel_while_reading():
            task = asyncio.create_task(prompt.show_async(terminal_console))
            assert await asyncio.to_thread(reading.wait, 5)
            task.cancel()
            with pytest.raises(asyncio.CancelledError):
                await task
            release.set()

        # asyncio.run waits for the worker thread before returning
        asyncio.run(_cancel_while_reading())
        assert len(worker_errors) == 1
