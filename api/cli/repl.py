"""Command-line interface and interactive REPL.

Usage:
    python -m api.cli structure answer.md --examples
    python -m api.cli recover response.txt
    python -m api.cli ask "Explain Python decorators" --content-type tutorial
    python -m api.cli rag "Latest findings on Mars exploration?"
    python -m api.cli title answer.md
    python -m api.cli                   # REPL
"""

import argparse
import sys
from typing import Optional

from generation import ContentType, ResponseFormat, StructuredPrompt
from shared.config import GenerationConfig, load_config
from shared.exceptions import SharedError
from shared.logger import setup_logger

from ..formatters import ResponseFormatter
from ..use_cases import RAGUseCase, StructureUseCase
from ..validators import RequestValidator, ValidationError

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_INVALID = 2

MODES = ("structure", "recover", "ask", "rag")


def print_help() -> None:
    print(
        "\nCommands:\n"
        "  :help                 Show this help\n"
        "  :quit / :q / exit     Quit\n"
        "  :show                 Show current settings\n"
        "  :mode <name>          Set mode (structure/recover/ask/rag)\n"
        "  :examples <on|off>    Toggle example extraction\n"
        "  :json <on|off>        Toggle JSON output\n"
        "\nEnter any other text to run it through the current mode.\n"
    )


def parse_toggle(value: str) -> bool:
    return value.lower() in ("1", "true", "yes", "y", "on")


def show_settings(mode, include_examples, as_json) -> None:
    print("Current settings:")
    print(f"  mode:        {mode}")
    print(f"  examples:    {'on' if include_examples else 'off'}")
    print(f"  json:        {'on' if as_json else 'off'}")


def read_input(source: str) -> str:
    """Read text from a file path, or stdin when ``source`` is "-"."""
    if source == "-":
        return sys.stdin.read()
    with open(source, "r", encoding="utf-8", errors="ignore") as handle:
        return handle.read()


class CommandRunner:
    """Runs one command against the use cases and returns printable output."""

    def __init__(self, config: GenerationConfig, rag_use_case: Optional[RAGUseCase] = None):
        self.config = config
        self.structure_use_case = StructureUseCase()
        self._rag_use_case = rag_use_case

    @property
    def rag_use_case(self) -> RAGUseCase:
        # built lazily so offline commands work without an API key
        if self._rag_use_case is None:
            self._rag_use_case = RAGUseCase(self.config)
        return self._rag_use_case

    def structure(self, text: str, include_examples: bool, as_json: bool) -> str:
        content = self.structure_use_case.structure(text, include_examples)
        if as_json:
            return ResponseFormatter.to_json(content.to_dict())
        return ResponseFormatter.format_structured_text(content)

    def recover(self, text: str) -> str:
        return ResponseFormatter.to_json(self.structure_use_case.recover(text))

    def ask(self, request: StructuredPrompt, as_json: bool) -> str:
        response = self.rag_use_case.ask(request)
        if as_json or not response.success:
            return ResponseFormatter.to_json(response.to_dict())
        return ResponseFormatter.format_structured_text(response.structured_content)

    def rag(self, prompt: str) -> str:
        return ResponseFormatter.to_json(self.rag_use_case.rag(prompt))

    def title(self, text: str) -> str:
        return self.rag_use_case.title(text)


def run_repl(runner: CommandRunner, include_examples: bool = False, as_json: bool = False) -> int:
    mode = "structure"

    print("Structured answers REPL")
    print("Type :help for commands.")

    while True:
        try:
            line = input("> ").strip()
        except (EOFError, KeyboardInterrupt):
            print()
            break

        if not line:
            continue

        cmd = line.split()
        head = cmd[0].lower()

        if head in (":quit", ":q", "exit"):
            break
        if head == ":help":
            print_help()
            continue
        if head == ":show":
            show_settings(mode, include_examples, as_json)
            continue
        if head == ":mode":
            if len(cmd) < 2 or cmd[1].lower() not in MODES:
                print(f"[error] usage: :mode <{'|'.join(MODES)}>")
                continue
            mode = cmd[1].lower()
            print(f"[ok] mode set to {mode}")
            continue
        if head == ":examples":
            if len(cmd) < 2:
                print("[error] usage: :examples <on|off>")
                continue
            include_examples = parse_toggle(cmd[1])
            print(f"[ok] examples {'on' if include_examples else 'off'}")
            continue
        if head == ":json":
            if len(cmd) < 2:
                print("[error] usage: :json <on|off>")
                continue
            as_json = parse_toggle(cmd[1])
            print(f"[ok] json {'on' if as_json else 'off'}")
            continue

        try:
            if mode == "structure":
                output = runner.structure(line, include_examples, as_json)
            elif mode == "recover":
                output = runner.recover(line)
            elif mode == "ask":
                prompt = RequestValidator.validate_prompt(line)
                output = runner.ask(
                    StructuredPrompt(prompt=prompt, include_examples=include_examples),
                    as_json,
                )
            else:
                output = runner.rag(RequestValidator.validate_prompt(line))
        except SharedError as exc:
            print(ResponseFormatter.format_error(exc))
            continue
        print(output.rstrip("\n"))

    return EXIT_OK


def run_command(args: argparse.Namespace, runner: CommandRunner) -> int:
    """Dispatch a parsed subcommand; returns the process exit code."""
    try:
        if args.command == "structure":
            print(runner.structure(read_input(args.source), args.examples, args.json).rstrip("\n"))
        elif args.command == "recover":
            print(runner.recover(read_input(args.source)))
        elif args.command == "ask":
            request = StructuredPrompt(
                prompt=RequestValidator.validate_prompt(args.prompt),
                response_format=RequestValidator.validate_response_format(args.response_format),
                content_type=RequestValidator.validate_content_type(args.content_type),
                include_examples=args.examples,
                temperature=RequestValidator.validate_temperature(args.temperature),
                max_tokens=RequestValidator.validate_max_tokens(args.max_tokens),
                context=args.context,
            )
            print(runner.ask(request, args.json).rstrip("\n"))
        elif args.command == "rag":
            print(runner.rag(RequestValidator.validate_prompt(args.prompt)))
        elif args.command == "title":
            print(runner.title(RequestValidator.validate_title_input(read_input(args.source))))
        else:
            return run_repl(runner, include_examples=args.examples, as_json=args.json)
    except ValidationError as exc:
        print(ResponseFormatter.format_error(exc), file=sys.stderr)
        return EXIT_INVALID
    except (SharedError, OSError) as exc:
        print(ResponseFormatter.format_error(exc), file=sys.stderr)
        return EXIT_ERROR
    return EXIT_OK


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Structure and recover model-generated answers")
    parser.add_argument(
        "--examples",
        action="store_true",
        help="Extract usage examples per section",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Output JSON",
    )
    subparsers = parser.add_subparsers(dest="command")

    structure = subparsers.add_parser("structure", help="Structure a generated answer")
    structure.add_argument("source", help="File path, or - for stdin")

    recover = subparsers.add_parser("recover", help="Recover a RAG record from model output")
    recover.add_argument("source", help="File path, or - for stdin")

    ask = subparsers.add_parser("ask", help="Generate and structure an answer")
    ask.add_argument("prompt")
    ask.add_argument(
        "--content-type",
        default=ContentType.EXPLANATION.value,
        help="explanation/list/tutorial/code/creative/analysis/question_answer",
    )
    ask.add_argument(
        "--response-format",
        default=ResponseFormat.STRUCTURED.value,
        help="text/structured/json/markdown",
    )
    ask.add_argument("--temperature", type=float, help="Generation temperature (0-2)")
    ask.add_argument("--max-tokens", type=int, help="Maximum output tokens (1-8192)")
    ask.add_argument("--context", help="Background context prepended to the prompt")

    rag = subparsers.add_parser("rag", help="Generate a RAG record (answer, articles, graph)")
    rag.add_argument("prompt")

    title = subparsers.add_parser("title", help="Generate a title for an answer")
    title.add_argument("source", help="File path, or - for stdin")

    return parser


def main(argv: Optional[list] = None) -> int:
    args = create_parser().parse_args(argv)
    config = load_config()
    setup_logger(level=config.log_level, log_file=config.log_file)
    return run_command(args, CommandRunner(config))


if __name__ == "__main__":
    sys.exit(main())


__all__ = ["run_repl", "run_command", "create_parser", "CommandRunner", "main"]
