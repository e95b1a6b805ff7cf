"""
Demonstration of the shared logger.

Shows three usage patterns:
- Direct singleton access through get_logger()
- Dependency injection into business services
- Many threads logging concurrently

Usage:
    python -m singlelog.main
    python -m singlelog.main --log-file /tmp/demo.log --threads 5 --messages 3
"""

import argparse
import logging
import os
import threading
import time
from typing import List, Optional

from dotenv import load_dotenv

from .config import LoggerConfig, set_logger_config
from .exceptions import InitializationError
from .pipeline import LoggerInterface, get_logger
from .services import EmailService, OrderService

logger = logging.getLogger(__name__)


def run_direct_usage(app_logger: LoggerInterface) -> None:
    """Pattern 1: components reach the singleton directly."""
    app_logger.log("Application started")
    app_logger.log("Task 1 executing")
    app_logger.log("Task 2 executing")
    app_logger.log_error("Simulated error occurred")


def run_injected_services(app_logger: LoggerInterface) -> None:
    """Pattern 2: the composition root hands the logger to collaborators."""
    OrderService(app_logger).process_order("ORD12345")
    EmailService(app_logger).send_email("customer@example.com")


def run_thread_demo(
    app_logger: LoggerInterface,
    threads: int = 5,
    messages: int = 3,
    stagger_ms: int = 50,
) -> None:
    """Pattern 3: several threads log concurrently with a stagger between calls."""

    def worker(thread_id: int) -> None:
        for j in range(messages):
            app_logger.log(f"Thread {thread_id} - Message {j + 1}")
            time.sleep(stagger_ms / 1000)

    workers = [
        threading.Thread(target=worker, args=(i + 1,), name=f"demo-{i + 1}")
        for i in range(threads)
    ]
    for t in workers:
        t.start()
    for t in workers:
        t.join()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Demonstrate the thread-safe singleton logger",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    python -m singlelog.main                        # Log to ./app.log
    python -m singlelog.main --log-file demo.log    # Custom log file
    python -m singlelog.main --threads 10 --no-echo # More threads, quiet
        """,
    )
    parser.add_argument(
        "--log-file", "-f",
        help="Log file path (overrides SINGLELOG_FILE)",
    )
    parser.add_argument(
        "--threads", "-t",
        type=int,
        default=5,
        help="Number of concurrent logging threads",
    )
    parser.add_argument(
        "--messages", "-m",
        type=int,
        default=3,
        help="Messages logged by each thread",
    )
    parser.add_argument(
        "--stagger-ms",
        type=int,
        default=50,
        help="Delay between a thread's own messages in milliseconds",
    )
    parser.add_argument(
        "--echo",
        action=argparse.BooleanOptionalAction,
        default=True,
        help="Print each entry to the console as it is logged",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    load_dotenv()

    log_level = os.getenv("LOG_LEVEL", "INFO").upper()
    logging.basicConfig(
        level=getattr(logging, log_level, logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    args = build_parser().parse_args(argv)

    # Command-line options override the environment; the rest still come from it
    overrides = {"echo_to_console": args.echo}
    if args.log_file:
        overrides["log_file_path"] = args.log_file

    print("=== SINGLETON LOGGER DEMO ===\n")

    try:
        set_logger_config(LoggerConfig(**overrides))
        app_logger = get_logger()
    except (ValueError, InitializationError) as e:
        logger.error(f"Logger setup failed: {e}")
        return 1

    print("1. DIRECT SINGLETON USAGE:")
    run_direct_usage(app_logger)

    print("\n2. DEPENDENCY INJECTION PATTERN:")
    run_injected_services(app_logger)

    print("\n3. THREAD-SAFE DEMONSTRATION:")
    run_thread_demo(
        app_logger,
        threads=args.threads,
        messages=args.messages,
        stagger_ms=args.stagger_ms,
    )
    print("\nAll threads completed.")

    if not app_logger.flush(timeout=app_logger.config.shutdown_timeout_seconds):
        logger.warning(f"{app_logger.pipeline.queue_size} entries still pending")
    app_logger.shutdown()

    print(f"\nLog file created at: {app_logger.log_file_path}")
    print("\n=== DEMO COMPLETED ===")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
