"""Interactive read-eval-print loop around the calculator."""
from contextlib import nullcontext
import readline
from typing import Callable, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field
from rich.console import Console

from func_calc.common.calculator import calc
from func_calc.common.logger import logger
from func_calc.common.parser import ParseError


class CalculatorShell(BaseModel):
    """
    Line-oriented calculator shell.

    Lifecycle:
        - Switches the terminal to its alternate screen and prints the banner
        - Reads one expression per line, with readline editing and history
        - Prints "=> value" on stdout, or the parse error on stderr
        - Stops on a quit command or end of input, then restores the screen
    """

    # Allow arbitrary types like rich.console.Console
    model_config = ConfigDict(arbitrary_types_allowed=True)

    prompt: str = Field(default=">> ", description="Prompt shown before each line")
    banner: str = Field(default="Input expression", description="Text printed once at startup")
    quit_commands: Tuple[str, ...] = Field(default=("q", "quit"), description="Lines that end the session")
    history_size: int = Field(default=20, ge=0, description="Maximum number of lines kept in history")
    alternate_screen: bool = Field(default=True, description="Run inside the terminal alternate screen")
    console: Console = Field(default_factory=Console, description="Console for results")
    error_console: Console = Field(
        default_factory=lambda: Console(stderr=True), description="Console for error messages"
    )

    def _trim_history(self) -> None:
        """Drop the oldest history entries beyond history_size."""
        while readline.get_current_history_length() > self.history_size:
            readline.remove_history_item(0)

    def handle_line(self, line: str) -> bool:
        """
        Calculate one input line and print the outcome.

        :param str line: Line as typed by the user

        :return: False if the line asks to end the session, True otherwise
        :rtype: bool
        """
        line = line.strip()
        if line in self.quit_commands:
            return False
        if not line:
            return True

        try:
            result: float = calc(line)
        except ParseError as exc:
            self.error_console.print(str(exc), markup=False, highlight=False)
        else:
            self.console.print(f"=> {result}", markup=False, highlight=False)
        return True

    def run(self, read_line: Optional[Callable[[str], str]] = None) -> None:
        """
        Run the loop until a quit command or end of input.

        Ctrl-C discards the line being typed and shows a fresh prompt.

        :param read_line: Function reading one line given the prompt, defaults to input()
        """
        read_line = read_line or input
        screen = self.console.screen(hide_cursor=False) if self.alternate_screen else nullcontext()

        logger.info("🐚🏁 Shell started")
        with screen:
            self.console.print(self.banner, markup=False, highlight=False)
            while True:
                try:
                    line: str = read_line(self.prompt)
                except EOFError:
                    break
                except KeyboardInterrupt:
                    self.console.print()
                    continue

                self._trim_history()
                if not self.handle_line(line):
                    break
        logger.info("🐚✅ Shell stopped")
