"""
Command-line interface for OpenAntrag Display.

Renders the latest proposals of a parliament as an HTML fragment, or
dumps the raw lookups as JSON.

Usage:
    python -m openantrag.cli.display_cli --parliament bund --count 5
    python -m openantrag.cli.display_cli --parliament bund --json --steps
    python -m openantrag.cli.display_cli --help
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from ..adapters.base_client import RequestError
from ..adapters.openantrag_client import OpenAntragClient
from ..config import settings
from ..services.display_service import ProposalDisplayService


# Configure logging
logging.basicConfig(
    level=settings.app.log_level,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)

logger = logging.getLogger(__name__)


def build_json_output(
    client: OpenAntragClient,
    parliament: str,
    count: int,
    include_steps: bool
) -> dict:
    """
    Collect the lookups for a parliament into one JSON document.

    Raises:
        RequestError: If the proposals cannot be fetched
    """
    output = {
        "parliament": parliament,
        "display_name": client.get_display_name(parliament),
        "proposals": [p.to_payload() for p in client.get_top_proposals(parliament, count)],
    }
    if include_steps:
        output["process_steps"] = client.get_process_steps(parliament)
    return output


def run_display(
    parliament: str,
    count: Optional[int],
    color: Optional[str],
    include_steps: bool,
    as_json: bool,
    output_file: Optional[str],
    client: Optional[OpenAntragClient] = None
) -> int:
    """
    Fetch and render proposals for a parliament.

    Args:
        parliament: Key of the parliament
        count: Number of proposals (None uses the configured default)
        color: Optional CSS background color for the HTML fragment
        include_steps: Include process steps (JSON output only)
        as_json: Emit JSON instead of HTML
        output_file: Optional file path to write to instead of stdout
        client: Optional client (created and closed here if None)

    Returns:
        Process exit code
    """
    if count is None:
        count = settings.openantrag.default_count
    owns_client = client is None
    client = client or OpenAntragClient()

    try:
        if as_json:
            content = json.dumps(
                build_json_output(client, parliament, count, include_steps),
                indent=2,
                ensure_ascii=False
            )
        else:
            if include_steps:
                logger.warning("--steps is only included in JSON output")
            content = ProposalDisplayService(client).render(parliament, count=count, color=color)
    except RequestError as e:
        logger.error(f"Could not fetch proposals for {parliament}: {e.message}")
        return 1
    finally:
        if owns_client:
            client.close()

    if output_file:
        output_path = Path(output_file)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(content + "\n", encoding="utf-8")
        logger.info(f"Output saved to: {output_path.absolute()}")
    else:
        print(content)

    return 0


def main(argv: Optional[Sequence[str]] = None) -> None:
    """Main CLI entry point"""
    parser = argparse.ArgumentParser(
        description="Render OpenAntrag proposals for a parliament",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Latest 3 proposals of a parliament as HTML
  python -m openantrag.cli.display_cli --parliament bund

  # Latest 10 proposals with a background color, saved to a file
  python -m openantrag.cli.display_cli --parliament bund --count 10 --color "#eef" --output bund.html

  # Raw lookups including process steps as JSON
  python -m openantrag.cli.display_cli --parliament bund --json --steps
        """
    )

    parser.add_argument(
        "--parliament",
        required=True,
        help="Key of the parliament (e.g., bund)"
    )

    parser.add_argument(
        "--count",
        type=int,
        default=None,
        help=f"Number of proposals to show (default: {settings.openantrag.default_count})"
    )

    parser.add_argument(
        "--color",
        help="CSS background color for each proposal"
    )

    parser.add_argument(
        "--steps",
        action="store_true",
        help="Include the parliament's process steps (JSON output)"
    )

    parser.add_argument(
        "--json",
        action="store_true",
        help="Emit JSON instead of an HTML fragment"
    )

    parser.add_argument(
        "--output",
        type=str,
        help="Write output to a file instead of stdout"
    )

    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable verbose logging (DEBUG level)"
    )

    args = parser.parse_args(argv)

    if args.count is not None and args.count < 1:
        parser.error("--count must be at least 1")

    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)
        logger.debug("Verbose logging enabled")

    exit_code = run_display(
        parliament=args.parliament,
        count=args.count,
        color=args.color,
        include_steps=args.steps,
        as_json=args.json,
        output_file=args.output
    )

    sys.exit(exit_code)


if __name__ == "__main__":
    main()
