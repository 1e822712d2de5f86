"""
Tests for WidgetEditor draft handling.
"""

import asyncio

import pytest

from client.api import TransportError
from client.editor import WidgetEditor
from client.state import WidgetsState
from models import Widget


@pytest.fixture
def loaded_state(state, mock_api):
    mock_api.get_widgets.return_value = [Widget(id="a", text="hi"), Widget(id="b", text="yo")]
    asyncio.run(state.load())
    mock_api.reset_mock()
    return state


def test_draft_starts_from_committed_text(loaded_state):
    editor = WidgetEditor(loaded_state, "a")

    assert editor.text == "hi"
    assert editor.dirty is False


def test_typing_does_not_hit_network(loaded_state, mock_api):
    editor = WidgetEditor(loaded_state, "a")

    editor.edit("h")
    editor.edit("hello")

    assert editor.text == "hello"
    assert editor.dirty is True
    assert loaded_state.find("a").text == "hi"
    mock_api.save_widget.assert_not_called()


def test_blur_commits_changed_draft(loaded_state, mock_api):
    editor = WidgetEditor(loaded_state, "a")
    editor.edit("hello")

    committed = asyncio.run(editor.blur())

    assert committed is True
    assert loaded_state.find("a") == Widget(id="a", text="hello")
    assert editor.text == "hello"
    assert editor.dirty is False
    mock_api.save_widget.assert_called_once_with(Widget(id="a", text="hello"))


def test_blur_without_change_does_nothing(loaded_state, mock_api):
    editor = WidgetEditor(loaded_state, "a")
    editor.edit("changed")
    editor.edit("hi")

    assert asyncio.run(editor.blur()) is False
    mock_api.save_widget.assert_not_called()


def test_blur_after_update_failure_stays_bound_to_draft(loaded_state, mock_api):
    mock_api.save_widget.side_effect = TransportError("boom")
    editor = WidgetEditor(loaded_state, "a")
    editor.edit("hello")

    asyncio.run(editor.blur())

    assert editor.text == "hello"
    assert loaded_state.find("a").text == "hello"


def test_draft_follows_committed_change(loaded_state):
    editor = WidgetEditor(loaded_state, "a")
    editor.edit("unsaved")

    asyncio.run(loaded_state.update_widget(Widget(id="a", text="from elsewhere")))

    assert editor.text == "from elsewhere"


def test_draft_follows_revert(mock_api, ids):
    state = WidgetsState(mock_api, revert_failed_updates=True, id_factory=ids)
    mock_api.get_widgets.return_value = [Widget(id="a", text="hi")]
    mock_api.save_widget.side_effect = TransportError("boom")
    asyncio.run(state.load())
    editor = WidgetEditor(state, "a")
    editor.edit("hello")

    asyncio.run(editor.blur())

    assert state.find("a").text == "hi"
    assert editor.text == "hi"


def test_delete_delegates_to_state(loaded_state, mock_api):
    editor = WidgetEditor(loaded_state, "a")

    asyncio.run(editor.delete())

    assert loaded_state.find("a") is None
    assert editor.widget is None
    assert asyncio.run(editor.blur()) is False
    mock_api.delete_widget.assert_called_once_with("a")


def test_closed_editor_stops_syncing(loaded_state):
    editor = WidgetEditor(loaded_state, "a")
    editor.close()

    asyncio.run(loaded_state.update_widget(Widget(id="a", text="bye")))

    assert editor.text == "hi"
