"""Entry point for the draftstudio command."""

import asyncio
import logging
import sys
from pathlib import Path

from .errors import StudioError
from .models import TreeItem
from .state import StudioState

COMMANDS = ("status", "tree", "publish", "revert-all")

USAGE = "usage: draftstudio [project_path] [status|tree|publish MESSAGE|revert-all]"


def format_tree(items: list[TreeItem], depth: int = 0) -> list[str]:
    """Render tree items as indented lines."""
    lines = []
    for item in items:
        if item.hide:
            continue
        name = f"{item.name}/" if item.type == "directory" else item.name
        status = f" [{item.status.value}]" if item.status else ""
        lines.append(f"{'  ' * depth}{name}{status}")
        if item.children:
            lines.extend(format_tree(item.children, depth + 1))
    return lines


async def run(project_path: Path, command: str, args: list[str]) -> int:
    """Run one command against the project."""
    studio = StudioState(project_path)
    try:
        await studio.load()

        if command == "status":
            files = studio.publisher.pending_files()
            if not files:
                print("No pending changes")
            for file in files:
                print(f"{file.status.value:>8}  {file.path}")

        elif command == "tree":
            for tree_state in (studio.document_tree, studio.media_tree):
                await tree_state.rebuild()
                print(f"{tree_state.root_id.value}/")
                print("\n".join(format_tree(tree_state.tree, depth=1)))

        elif command == "publish":
            if not args:
                print(USAGE, file=sys.stderr)
                return 2
            result = await studio.publish(" ".join(args))
            if result is None:
                print("Nothing published")
            else:
                print(f"Published {result.commit_sha}: {result.url}")

        elif command == "revert-all":
            await studio.revert_all()
            print("All pending changes discarded")

    except StudioError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    finally:
        await studio.close()

    return 0


def main():
    """Run draftstudio."""
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    args = sys.argv[1:]

    # Project path from command line or the current directory
    project_path = Path.cwd()
    if args and args[0] not in COMMANDS:
        project_path = Path(args.pop(0)).resolve()

    command = args.pop(0) if args else "status"
    if command not in COMMANDS:
        print(USAGE, file=sys.stderr)
        sys.exit(2)

    sys.exit(asyncio.run(run(project_path, command, args)))


if __name__ == "__main__":
    main()
