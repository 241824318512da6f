#!/usr/bin/env python3
import logging

import pytest

from numguess.base.commands import (
    CommandProcessor, CommandResult, CommandStatus, ErrorKind,
    MSG_EMPTY_COMMAND, MSG_GUESS_USAGE, MSG_INVALID_NUMBER, MSG_NOT_PLAYING,
    MSG_UNEXPECTED, MSG_UNKNOWN_COMMAND, parse_int,
)
from numguess.base.state import GameState

HELP_TEXT = "Commands:\nstart\nguess <number>\nrestart\nquit\nsave\nload\nhelp"


def test_tokenize_trims_lowercases_and_splits_on_single_spaces():
    assert CommandProcessor.tokenize("  GUESS 5  ") == ["guess", "5"]
    assert CommandProcessor.tokenize("guess  5") == ["guess", "", "5"]
    assert CommandProcessor.tokenize("") == [""]
    assert CommandProcessor.tokenize(None) == [""]


@pytest.mark.parametrize("token, expected", [
    ("5", 5),
    ("-3", -3),
    ("+4", 4),
    ("007", 7),
    ("2147483647", 2147483647),
    ("-2147483648", -2147483648),
    ("2147483648", None),
    ("abc", None),
    ("", None),
    ("5.0", None),
    ("1_000", None),
    ("5a", None),
])
def test_parse_int(token, expected):
    assert parse_int(token) == expected


@pytest.mark.parametrize("text", ["", "   ", None])
def test_empty_input_prompts_for_command(manager, text):
    result = manager.process_command(text)
    assert result.message == MSG_EMPTY_COMMAND
    assert result.status == CommandStatus.INVALID
    assert result.error_kind == ErrorKind.USER_INPUT
    assert manager.current_state == GameState.MAIN_MENU


def test_unknown_command(manager):
    result = manager.process_command("dance")
    assert result.message == MSG_UNKNOWN_COMMAND
    assert result.error_kind == ErrorKind.USER_INPUT
    assert manager.current_state == GameState.MAIN_MENU


def test_commands_are_case_insensitive(manager):
    manager.process_command("START")
    assert manager.current_state == GameState.PLAYING
    assert manager.process_command("Guess 7").message == "Correct! The number was 7. Game over."


def test_help_is_the_same_in_every_state(manager):
    replies = [manager.handle("help")]
    manager.handle("start")
    replies.append(manager.handle("help"))
    manager.handle("guess 7")
    replies.append(manager.handle("HELP me please"))
    assert replies == [HELP_TEXT] * 3
    assert manager.process_command("help").status == CommandStatus.HELP


def test_guess_before_start_changes_nothing(manager):
    for text in ("guess 5", "guess", "guess abc"):
        result = manager.process_command(text)
        assert result.message == MSG_NOT_PLAYING
        assert result.status == CommandStatus.FAILURE
    assert manager.current_state == GameState.MAIN_MENU
    assert manager.session is None


def test_guess_after_game_over_changes_nothing(manager):
    manager.handle("start")
    manager.handle("quit")
    session = manager.session
    assert manager.handle("guess 7") == MSG_NOT_PLAYING
    assert manager.current_state == GameState.GAME_OVER
    assert manager.session is session


def test_guess_without_number_shows_usage(manager):
    manager.handle("start")
    assert manager.handle("guess") == MSG_GUESS_USAGE
    assert manager.current_state == GameState.PLAYING


@pytest.mark.parametrize("text", ["guess abc", "guess 5.5", "guess  7", "guess 99999999999"])
def test_guess_with_bad_number_is_rejected(manager, text):
    manager.handle("start")
    session = manager.session
    result = manager.process_command(text)
    assert result.message == MSG_INVALID_NUMBER
    assert result.error_kind == ErrorKind.USER_INPUT
    assert manager.current_state == GameState.PLAYING
    assert manager.session is session


def test_extra_guess_arguments_are_ignored(manager):
    manager.handle("start")
    assert manager.handle("guess 3 4 5") == "Too low! Try again."


def test_commands_register_in_help_order():
    processor = CommandProcessor()
    assert processor.get_all_commands() == ["start", "guess", "restart", "quit", "save", "load", "help"]
    assert processor.get_command_help("GUESS").syntax == "guess <number>"
    assert processor.get_command_handler("nope") is None


def test_handler_exception_becomes_unexpected_error(manager, caplog):
    processor = CommandProcessor()

    def broken(mgr, args):
        raise RuntimeError("boom")

    processor.register_command("broken", broken, description="Always fails.")

    with caplog.at_level(logging.ERROR, logger="COMMANDS"):
        result = processor.process_command(manager, "broken")

    assert result.message == MSG_UNEXPECTED
    assert result.status == CommandStatus.ERROR
    assert result.error_kind == ErrorKind.UNEXPECTED
    assert any("boom" in rec.getMessage() for rec in caplog.records)


def test_result_helpers():
    assert CommandResult.success("ok").is_success
    assert CommandResult.help("list").is_success
    assert CommandResult.failure("no").is_failure
    assert CommandResult.invalid("bad").error_kind == ErrorKind.USER_INPUT
    assert CommandResult.error("oops").error_kind == ErrorKind.UNEXPECTED
