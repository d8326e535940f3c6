import pytest
from tennisgame.common.io_interface import (
    AsyncIOInterfaceWrapper,
    ConsoleIOInterface,
    DummyIOInterface,
    LoggingIOInterface,
    TeeIOInterface,
    TestIOInterface,
)

NAMES = ["Alice", "Bob"]


def test_dummy_io_interface_methods():
    interface = DummyIOInterface()

    assert interface.output("Test") is None
    assert interface.input("prompt") == ""
    assert interface.get_point_winner(NAMES) == "Alice"
    with pytest.raises(ValueError):
        interface.get_point_winner([])


def test_console_io_interface_methods(mocker, capsys):
    interface = ConsoleIOInterface()

    mocker.patch("builtins.input", side_effect=["test_input", "2", "bob"])

    interface.output("Test message")
    assert capsys.readouterr().out == "Test message\n"

    assert interface.input("Enter something: ") == "test_input"
    assert interface.get_point_winner(NAMES) == "Bob"
    assert interface.get_point_winner(NAMES) == "Bob"


def test_test_io_interface_methods():
    interface = TestIOInterface()

    interface.output("Test message")
    assert interface.sent_messages == ["Test message"]

    interface.add_response(" Alice ")
    assert interface.get_point_winner(NAMES) == "Alice"
    assert interface.prompts == ["Who won the point? (Alice / Bob) "]

    with pytest.raises(ValueError):
        interface.input("prompt")


def test_get_point_winner_gives_up_after_three_attempts():
    interface = TestIOInterface()
    for answer in ["3", "", "Carol"]:
        interface.add_response(answer)

    with pytest.raises(ValueError, match="Too many invalid answers"):
        interface.get_point_winner(NAMES)

    assert interface.sent_messages == [
        "Invalid choice, valid players are: Alice, Bob"
    ] * 3


def test_logging_io_interface(tmp_path):
    log_file = tmp_path / "transcript.log"
    interface = LoggingIOInterface(str(log_file))

    interface.output("Fifteen-Love")
    assert interface.input("Who won the point? ") == ""

    assert log_file.read_text().splitlines() == [
        "Fifteen-Love",
        "[INPUT PROMPT] Who won the point? ",
    ]


@pytest.mark.asyncio
async def test_logging_io_interface_async(tmp_path):
    log_file = tmp_path / "transcript.log"
    interface = LoggingIOInterface(str(log_file))

    await interface.output_async("Deuce")
    await interface.output_async("Advantage Bob")

    assert log_file.read_text() == "Deuce\nAdvantage Bob\n"


def test_tee_io_interface(tmp_path):
    log_file = tmp_path / "transcript.log"
    primary = TestIOInterface()
    primary.add_response("1")
    interface = TeeIOInterface(primary, LoggingIOInterface(str(log_file)))

    interface.output("Love-All")
    assert interface.input("Who? ") == "1"

    assert primary.sent_messages == ["Love-All"]
    assert log_file.read_text().splitlines() == ["Love-All", "Who? 1"]


@pytest.mark.asyncio
async def test_async_wrapper(tmp_path):
    primary = TestIOInterface()
    primary.add_response("hello")
    primary.add_response("2")
    wrapper = AsyncIOInterfaceWrapper(primary)

    await wrapper.output("Thirty-All")
    assert await wrapper.input("Say something: ") == "hello"
    assert await wrapper.get_point_winner(NAMES) == "Bob"
    wrapper.close()

    assert primary.sent_messages == ["Thirty-All"]


@pytest.mark.asyncio
async def test_async_wrapper_writes_transcripts_with_aiofiles(tmp_path, mocker):
    log_file = tmp_path / "transcript.log"
    interface = LoggingIOInterface(str(log_file))
    output_async = mocker.spy(interface, "output_async")
    wrapper = AsyncIOInterfaceWrapper(interface)

    await wrapper.output("Win for Alice")
    wrapper.close()

    output_async.assert_called_once_with("Win for Alice")
    assert log_file.read_text() == "Win for Alice\n"


def test_exact_name_wins_over_case_insensitive_match():
    interface = TestIOInterface()
    for answer in ["Alice", "ALICE", "alice", "2"]:
        interface.add_response(answer)
    names = ["Alice", "ALICE"]

    assert interface.get_point_winner(names) == "Alice"
    assert interface.get_point_winner(names) == "ALICE"
    # "alice" matches both players and is asked again
    assert interface.get_point_winner(names) == "ALICE"
    assert interface.sent_messages == [
        "Invalid choice, valid players are: Alice, ALICE"
    ]


def test_numeric_player_names():
    interface = TestIOInterface()
    for answer in ["2", "1", "BOB"]:
        interface.add_response(answer)
    names = ["2", "Bob"]

    assert interface.get_point_winner(names) == "2"
    assert interface.get_point_winner(names) == "2"
    assert interface.get_point_winner(names) == "Bob"


def test_exact_name_wins_over_player_number():
    interface = TestIOInterface()
    interface.add_response("1")

    assert interface.get_point_winner(["Bob", "1"]) == "1"
