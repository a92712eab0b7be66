"""CLI entry point for passage search."""

import argparse
import asyncio
import sys

from passage_search.errors import InvalidTransition, UnknownResult
from passage_search.providers.base import LinkRef, ProviderName
from passage_search.providers.registry import parse_provider
from passage_search.search.orchestrator import SearchOrchestrator
from passage_search.session.state import Phase, SessionState
from passage_search.utils.logger import get_logger, set_level

log = get_logger(__name__)

HELP = """Commands:
  search [provider]   generate queries and search (encyclopedia, video, social)
  open N              open result N (plays videos, prints links)
  back                leave the player and return to the results
  load REF            load a different passage
  quit                exit"""


def render(state: SessionState) -> None:
    """Print the session state as plain text."""
    if state.phase is Phase.ITEM_PLAYING and state.playing:
        print(f"\nPlaying: {state.playing.embed_url}\n(type 'back' to return)\n")
        return
    if state.notice:
        print(f"\n{state.notice}\n")
    if state.phase is Phase.RESULTS_SHOWN and state.results:
        print()
        for i, record in enumerate(state.results, 1):
            marker = ">" if record.playable else "-"
            print(f"  [{i}] {marker} {record.display_title}")
        print()


async def run_once(orchestrator: SearchOrchestrator, ref: str, provider: ProviderName) -> None:
    print(f"\nPassage: {ref}")
    print("Fetching text...\n")
    await orchestrator.load_source(ref)
    if orchestrator.current_state().phase is Phase.ERROR:
        render(orchestrator.current_state())
        return
    print(f"Searching {provider.display_name}...")
    await orchestrator.run_search(provider)
    render(orchestrator.current_state())


def open_result(orchestrator: SearchOrchestrator, arg: str) -> None:
    results = orchestrator.current_state().results or ()
    try:
        record = results[int(arg) - 1]
    except (ValueError, IndexError):
        print(f"\nNo result numbered {arg!r}.\n")
        return
    record = orchestrator.select_result(record.identity_key)
    if isinstance(record.target, LinkRef):
        print(f"\nOpen: {record.target.url}\n")
    else:
        render(orchestrator.current_state())


async def interactive_mode(orchestrator: SearchOrchestrator, ref: str, provider: ProviderName) -> None:
    """REPL loop for interactive searching."""
    print("Passage Search  (type 'help' for commands, 'quit' to stop)\n")
    await orchestrator.load_source(ref)
    render(orchestrator.current_state())
    while True:
        try:
            line = (await asyncio.to_thread(input, "> ")).strip()
        except (EOFError, KeyboardInterrupt):
            print("\nGoodbye.")
            break
        if not line:
            continue
        cmd, _, arg = line.partition(" ")
        cmd, arg = cmd.lower(), arg.strip()

        if cmd in ("quit", "exit", "q"):
            print("Goodbye.")
            break
        if cmd == "help":
            print(HELP)
        elif cmd == "search":
            if arg:
                try:
                    provider = parse_provider(arg)
                except ValueError as exc:
                    print(f"\n{exc}\n")
                    continue
            print(f"Searching {provider.display_name}...")
            await orchestrator.run_search(provider)
            render(orchestrator.current_state())
        elif cmd == "open" and arg:
            try:
                open_result(orchestrator, arg)
            except (InvalidTransition, UnknownResult) as exc:
                print(f"\n{exc}\n")
        elif cmd == "back":
            render(orchestrator.go_back())
        elif cmd == "load" and arg:
            await orchestrator.load_source(arg)
            render(orchestrator.current_state())
        else:
            print(HELP)


def main() -> None:
    parser = argparse.ArgumentParser(description="Passage-driven multi-provider search")
    parser.add_argument("ref", nargs="?", help="Passage reference, e.g. 'Genesis 1:1-5'")
    parser.add_argument("--provider", "-p", default=ProviderName.ENCYCLOPEDIA.value,
                        help="encyclopedia, video or social (default: encyclopedia)")
    parser.add_argument("--interactive", "-i", action="store_true",
                        help="Start interactive REPL mode")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Enable DEBUG logging")
    args = parser.parse_args()

    if args.verbose:
        set_level("DEBUG")
        log.debug("CLI arguments: %s", vars(args))

    if not args.ref:
        parser.print_help()
        sys.exit(1)

    try:
        provider = parse_provider(args.provider)
    except ValueError as exc:
        parser.error(str(exc))

    orchestrator = SearchOrchestrator()

    if args.interactive:
        asyncio.run(interactive_mode(orchestrator, args.ref, provider))
    else:
        asyncio.run(run_once(orchestrator, args.ref, provider))


if __name__ == "__main__":
    main()
