# src/task_tracker/connectors/console_connector.py

from __future__ import annotations

import contextlib
import logging
import sys
from enum import Enum, auto
from typing import TextIO

from ..cli.commands import MSG_GOODBYE, MSG_INVALID_OPTION, MenuRegistry, MenuReply
from ..cli.commands import registry as menu_registry
from ..core.ports import Emitter, LineReader
from ..core.state import AppState

logger = logging.getLogger(__name__)

PROMPT_CHOICE = "Choose an option: "
MSG_INTERNAL_ERROR = "Internal error while handling an option."


class LoopState(Enum):
    SHOW_MENU = auto()
    AWAIT_CHOICE = auto()
    DISPATCH = auto()
    EXIT = auto()


class ConsoleReader:
    """
    LineReader for the console.

    Without a stream it reads through input(), like any interactive prompt.
    With an injected stream it writes the prompt to `out` (sys.stdout by
    default) and reads from the stream. The stream is only closed on
    close() when the reader was told it owns it.
    """

    def __init__(
        self,
        stream: TextIO | None = None,
        out: TextIO | None = None,
        *,
        owns_stream: bool = False,
    ) -> None:
        self._stream = stream
        self._out = out
        self._owns_stream = owns_stream
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def readline(self, prompt: str = "") -> str:
        if self._closed:
            raise EOFError("reader is closed")

        if self._stream is None:
            # input() keeps line editing/history on a TTY; raises EOFError itself.
            return input(prompt)

        if prompt:
            out = self._out or sys.stdout
            out.write(prompt)
            out.flush()

        line = self._stream.readline()
        if not line:
            raise EOFError
        return line.rstrip("\r\n")

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        if self._owns_stream and self._stream is not None:
            self._stream.close()
        logger.debug("Console reader closed.")

    def __enter__(self) -> ConsoleReader:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


def run_console_loop(
    state: AppState,
    reader: LineReader,
    *,
    menu: MenuRegistry | None = None,
    emit: Emitter = print,
) -> None:
    """
    Menu loop: SHOW_MENU -> AWAIT_CHOICE -> DISPATCH -> SHOW_MENU ... -> EXIT.

    The reader is owned by the loop and closed on every way out
    (option "5", end of input, Ctrl+C, or an error escaping the loop).
    """
    menu = menu or menu_registry
    logger.info("Console menu started (%s).", state.settings.app_name)

    loop_state = LoopState.SHOW_MENU
    choice = ""

    with contextlib.closing(reader):
        while loop_state is not LoopState.EXIT:
            if loop_state is LoopState.SHOW_MENU:
                emit(menu.build_menu())
                loop_state = LoopState.AWAIT_CHOICE
                continue

            if loop_state is LoopState.AWAIT_CHOICE:
                try:
                    choice = reader.readline(PROMPT_CHOICE)
                except EOFError:
                    logger.info("Console EOF received, exiting.")
                    emit(MSG_GOODBYE)
                    loop_state = LoopState.EXIT
                    continue
                except KeyboardInterrupt:
                    logger.info("Console KeyboardInterrupt, exiting.")
                    emit("")
                    emit(MSG_GOODBYE)
                    loop_state = LoopState.EXIT
                    continue
                except UnicodeDecodeError as e:
                    logger.warning("Undecodable console input at the menu prompt: %s", e)
                    emit(MSG_INVALID_OPTION)
                    loop_state = LoopState.SHOW_MENU
                    continue
                except OSError:
                    logger.exception("Console input failed, exiting.")
                    emit(MSG_GOODBYE)
                    loop_state = LoopState.EXIT
                    continue
                loop_state = LoopState.DISPATCH
                continue

            # DISPATCH
            try:
                reply = menu.handle(state, choice, reader.readline)
            except EOFError:
                logger.info("Console EOF received mid-option, exiting.")
                emit(MSG_GOODBYE)
                loop_state = LoopState.EXIT
                continue
            except KeyboardInterrupt:
                logger.info("Console KeyboardInterrupt mid-option, exiting.")
                emit("")
                emit(MSG_GOODBYE)
                loop_state = LoopState.EXIT
                continue
            except Exception:
                logger.exception("Menu handler crashed (choice=%r).", choice)
                reply = MenuReply(MSG_INTERNAL_ERROR)

            emit(reply.text)
            loop_state = LoopState.EXIT if reply.stop else LoopState.SHOW_MENU

    logger.info("Console menu finished (tasks=%d).", state.task_store.count_tasks())
