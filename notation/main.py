# main.py
"""
Console front end for the notation converter.

Without arguments this starts an interactive REPL: a numbered menu lists the
four operations, ':mode N' picks one, and every other line is an expression
processed with the current operation. With --mode and an expression (or
--file) it runs once and exits, which is what scripts and batch jobs use.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from dataclasses import dataclass
from typing import Callable, Dict, List, Mapping, Optional, Tuple

from prompt_toolkit import PromptSession
from prompt_toolkit.completion import WordCompleter
from prompt_toolkit.history import FileHistory
from pydantic import BaseModel, ValidationError

from .config import NotationSettings, load_settings
from .converter import convert_infix_to_postfix, convert_postfix_to_infix
from .errors import NotationError
from .evaluator import evaluate_infix_expression, evaluate_postfix_expression

logger = logging.getLogger(__name__)

# --------------------------
# Operations
# --------------------------

@dataclass(frozen=True)
class Operation:
    """One of the four menu entries."""
    number: str
    name: str
    title: str
    label: str
    func: Callable[..., object]
    evaluates: bool


OPERATIONS: List[Operation] = [
    Operation('1', 'to-postfix', 'Convert infix to postfix', 'Postfix', convert_infix_to_postfix, False),
    Operation('2', 'to-infix', 'Convert postfix to infix', 'Infix', convert_postfix_to_infix, False),
    Operation('3', 'eval-postfix', 'Evaluate postfix expression', 'Answer', evaluate_postfix_expression, True),
    Operation('4', 'eval-infix', 'Evaluate infix expression', 'Answer', evaluate_infix_expression, True),
]
OPERATIONS_BY_NUMBER: Dict[str, Operation] = {op.number: op for op in OPERATIONS}
OPERATIONS_BY_NAME: Dict[str, Operation] = {op.name: op for op in OPERATIONS}


def format_number(value: float, precision: Optional[int] = None) -> str:
    if precision is None:
        return repr(value)
    return f"{value:.{precision}f}"


def run_operation(
    operation: Operation,
    expr: str,
    variables: Optional[Mapping[str, float]] = None,
    settings: Optional[NotationSettings] = None,
) -> str:
    """Run operation on expr and return the printable result. Raises NotationError."""
    settings = settings or NotationSettings()
    if operation.evaluates:
        value = operation.func(expr, variables=variables, max_stack_size=settings.max_stack_size)
        return format_number(value, settings.precision)
    return operation.func(expr, max_stack_size=settings.max_stack_size)


def parse_assignment(text: str) -> Tuple[str, float]:
    """Parse 'x=3' into ('x', 3.0). Raises ValueError on bad input."""
    name, sep, value = text.partition('=')
    name = name.strip()
    if not sep:
        raise ValueError(f"Expected name=value, got {text!r}")
    if len(name) != 1 or not name.isalpha():
        raise ValueError(f"Variable names are single letters, got {name!r}")
    try:
        return name, float(value.strip())
    except ValueError:
        raise ValueError(f"Expected a numeric value for {name}, got {value.strip()!r}")


# --------------------------
# Batch processing
# --------------------------

class BatchResult(BaseModel):
    """Outcome of one line of a batch file."""
    line: int
    expression: str
    result: Optional[str] = None
    error: Optional[str] = None
    kind: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def process_file(
    path: str,
    operation: Operation,
    variables: Optional[Mapping[str, float]] = None,
    settings: Optional[NotationSettings] = None,
) -> List[BatchResult]:
    """Run operation on every non-blank line of path."""
    results: List[BatchResult] = []
    with open(path, 'r', encoding='utf-8') as f:
        for number, raw in enumerate(f, start=1):
            expr = raw.strip()
            if not expr:
                continue
            try:
                out = run_operation(operation, expr, variables, settings)
                results.append(BatchResult(line=number, expression=expr, result=out))
            except NotationError as e:
                logger.info(f"Line {number} failed: {e.kind.value}: {e.message}")
                results.append(BatchResult(line=number, expression=expr, error=e.message, kind=e.kind.value))
    logger.info(f"Processed {len(results)} expressions from {path}")
    return results


# --------------------------
# REPL
# --------------------------

_COMMANDS = [':help', ':menu', ':mode', ':set', ':unset', ':vars', ':history', ':exit', ':quit']

HELP_TEXT = (
    "Notation REPL help:\n"
    "Converts and evaluates infix (2 + 3 * 4) and postfix (2 3 4 * +) expressions.\n"
    "Operators: + - * / ^   Brackets: ( ) { } [ ]   Variables: single letters\n"
    "Postfix operands must be separated by whitespace.\n"
    "Commands:\n"
    "  :help                  show this help\n"
    "  :menu                  list operations\n"
    "  :mode <0-4>            select an operation (0 exits)\n"
    "  :set <x>=<value>       bind a variable for evaluation\n"
    "  :unset <x>             remove a variable\n"
    "  :vars                  list variables\n"
    "  :history               show recent history\n"
    "  :exit                  exit\n"
)


class REPL:
    """Read-Eval-Print Loop over the four notation operations."""

    def __init__(self, settings: Optional[NotationSettings] = None):
        self.settings = settings or NotationSettings()
        self.history_file = self.settings.history_file
        self.operation = OPERATIONS_BY_NAME['eval-infix']
        self.variables: Dict[str, float] = {}

    def show_menu(self) -> str:
        lines = ["Enter a function to use:"]
        for op in OPERATIONS:
            marker = '*' if op is self.operation else ' '
            lines.append(f"{marker} {op.number}. {op.title}")
        lines.append("  0. exit")
        return "\n".join(lines)

    def _process_command(self, line: str) -> Optional[str]:
        """Process lines starting with ':' or 'help'. Returns a response if the line was a command, else None."""
        s = line.strip()
        if not s:
            return None
        if s.startswith(':'):
            body = s[1:].strip()
            if body == '':
                return "No command specified. Use :help for available commands."
            parts = body.split(None, 1)
            cmd = parts[0]
            args = parts[1].split() if len(parts) > 1 else []
            return self._run_command(cmd, args)
        if s.lower() == 'help':
            return HELP_TEXT
        return None

    def _run_command(self, cmd: str, args: List[str]) -> str:
        """Execute a colon command. Raises EOFError for exit/quit."""
        cmd_lower = cmd.lower()
        if cmd_lower in {'exit', 'quit'}:
            raise EOFError()
        if cmd_lower == 'help':
            return HELP_TEXT
        if cmd_lower == 'menu':
            return self.show_menu()
        if cmd_lower == 'mode':
            if not args:
                return f"Current mode: {self.operation.number}. {self.operation.title}"
            choice = args[0]
            if choice == '0':
                raise EOFError()
            op = OPERATIONS_BY_NUMBER.get(choice) or OPERATIONS_BY_NAME.get(choice)
            if op is None:
                return "Enter a number 1-4, or 0 to quit"
            self.operation = op
            return f"Mode: {op.number}. {op.title}"
        if cmd_lower == 'set':
            if not args:
                return "Usage: :set <x>=<value>"
            try:
                name, value = parse_assignment(''.join(args))
            except ValueError as e:
                return f"Error: {e}"
            self.variables[name] = value
            return f"{name} = {value!r}"
        if cmd_lower == 'unset':
            if not args:
                return "Usage: :unset <x>"
            if self.variables.pop(args[0], None) is None:
                return f"No variable named {args[0]}"
            return f"Removed {args[0]}"
        if cmd_lower == 'vars':
            if not self.variables:
                return "(no variables)"
            return "\n".join(f"{k} = {v!r}" for k, v in sorted(self.variables.items()))
        if cmd_lower == 'history':
            try:
                with open(self.history_file, 'r', encoding='utf-8') as f:
                    all_lines = f.read().splitlines()
                return "\n".join(all_lines[-50:])
            except OSError as e:
                return f"Could not read history: {e}"
        return f"Unknown command: {cmd}"

    def evaluate_line(self, line: str) -> Tuple[bool, str]:
        """Handle one line (command or expression). Returns (ok, output)."""
        cmd_out = self._process_command(line)
        if cmd_out is not None:
            return not cmd_out.startswith("Error:"), cmd_out
        try:
            out = run_operation(self.operation, line.strip(), self.variables, self.settings)
            return True, f"{self.operation.label}: {out}"
        except NotationError as e:
            return False, f"Error: {e}"
        except Exception as e:
            logger.exception("Unhandled error while processing input")
            return False, f"Unhandled error: {e}"

    def repl_loop(self) -> None:
        """Interactive loop with persistent history and command completion."""
        print("Notation REPL. Type :help for help. Ctrl-D or :exit to quit.")
        print(self.show_menu())
        session = PromptSession(history=FileHistory(self.history_file))
        completer = WordCompleter(_COMMANDS)
        while True:
            try:
                line = session.prompt(f"[{self.operation.number}]> ", completer=completer)
            except KeyboardInterrupt:
                print("^C")
                continue
            except EOFError:
                print("Exiting.")
                break
            if not line.strip():
                continue
            try:
                _, out = self.evaluate_line(line)
            except EOFError:
                print("Exiting.")
                break
            print(out)


# --------------------------
# Entry point
# --------------------------

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="notation",
        description="Convert and evaluate infix and postfix arithmetic expressions.",
    )
    parser.add_argument(
        "expression",
        nargs="?",
        help="Expression to process once. Starts the interactive REPL when omitted.",
    )
    parser.add_argument(
        "--mode",
        choices=sorted(OPERATIONS_BY_NAME),
        default="eval-infix",
        help="Operation to apply (default: eval-infix).",
    )
    parser.add_argument(
        "--file",
        type=str,
        help="Process every non-blank line of this file with --mode.",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="With --file, print results as a JSON array.",
    )
    parser.add_argument(
        "--var",
        action="append",
        default=[],
        metavar="NAME=VALUE",
        help="Bind a single-letter variable for evaluation (repeatable).",
    )
    parser.add_argument(
        "--max-stack-size",
        type=int,
        help="Limit every stack to this many entries.",
    )
    parser.add_argument(
        "--precision",
        type=int,
        help="Digits after the decimal point in evaluated results.",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        help="Logging level (default: NOTATION_LOG_LEVEL or WARNING).",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        settings = load_settings(
            log_level=args.log_level,
            max_stack_size=args.max_stack_size,
            precision=args.precision,
        )
    except ValidationError as e:
        print(f"Invalid configuration:\n{e}", file=sys.stderr)
        return 2

    logging.basicConfig(
        level=settings.logging_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    variables: Dict[str, float] = {}
    for item in args.var:
        try:
            name, value = parse_assignment(item)
        except ValueError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 2
        variables[name] = value

    operation = OPERATIONS_BY_NAME[args.mode]

    if args.file:
        try:
            results = process_file(args.file, operation, variables, settings)
        except OSError as e:
            print(f"Error: could not read {args.file}: {e}", file=sys.stderr)
            return 1
        if args.json:
            print(json.dumps([r.model_dump() for r in results], indent=2))
        else:
            for r in results:
                print(r.result if r.ok else f"Error: {r.error}")
        return 0 if all(r.ok for r in results) else 1

    if args.expression is not None:
        try:
            print(run_operation(operation, args.expression, variables, settings))
        except NotationError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1
        return 0

    repl = REPL(settings)
    repl.variables.update(variables)
    repl.repl_loop()
    return 0


if __name__ == '__main__':
    raise SystemExit(main())
