# src/task_tracker/connectors/console_connector.py

from __future__ import annotations

import logging
from collections.abc import Callable

from ..cli.commands import INVALID_OPTION, Command, CommandRegistry, coerce_int
from ..cli.commands import registry as command_registry
from ..core.ports import TaskRepo

logger = logging.getLogger(__name__)

InputFn = Callable[[str], str]
OutputFn = Callable[[str], None]


def run_console_loop(
    store: TaskRepo,
    *,
    registry: CommandRegistry | None = None,
    input_fn: InputFn = input,
    output_fn: OutputFn = print,
) -> None:
    """
    Interactive numbered-menu loop.

    Reads an option, prompts for that command's arguments, prints the reply
    and repeats. Option 0 exits; so does any text without a leading number.
    Storage errors (OSError) are not caught here.
    """
    registry = registry or command_registry
    menu = registry.build_menu()
    logger.info("Console loop started.")

    while True:
        output_fn(menu)
        try:
            option = coerce_int(input_fn("Enter option: "))
            command = registry.resolve(option)
            if command is None:
                output_fn(INVALID_OPTION)
                continue
            if command is Command.EXIT:
                logger.info("Console exit option received.")
                break
            args = [input_fn(prompt) for prompt in registry.prompts_for(command)]
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            output_fn("")
            break

        reply = registry.handle(store, command, args)
        if reply is not None:
            output_fn(reply)

    logger.info("Console loop finished.")
