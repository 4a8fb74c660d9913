import logging
import sys
import argparse

from core.app_context import AppContext
from core.config_loader import load_config
from core.exceptions import IOFailure

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def run_init(config) -> int:
    """Create local tables, seed the default admin and print store counts."""
    context = AppContext.build(config)
    try:
        context.initialize()
        stats = context.store.get_stats()
        mode = "remote" if context.store.adapter.is_remote_configured else "local"
        logger.info(f"Storage ready ({mode}): {stats.user_count} users, {stats.report_count} reports")
        return 0
    except IOFailure as e:
        logger.error(f"Cannot initialize: {e}")
        return 1
    finally:
        context.close()


def run_stats(config) -> int:
    context = AppContext.build(config)
    try:
        context.initialize()
        stats = context.store.get_stats()
        print(f"users={stats.user_count} reports={stats.report_count}")
        return 0
    except IOFailure as e:
        logger.error(f"Cannot read store: {e}")
        return 1
    finally:
        context.close()


def main(argv=None):
    parser = argparse.ArgumentParser(description="ATS Pro Driver")
    parser.add_argument('--mode', type=str, choices=['serve', 'init', 'stats'], default='serve',
                      help='serve (default): run the web API, init: prepare storage, stats: print counts')
    parser.add_argument('--config', type=str, default='config.yaml',
                      help='Path to the YAML configuration file')
    args = parser.parse_args(argv)

    config = load_config(args.config)
    logger.info(f"ATS Pro starting in {args.mode.upper()} mode...")

    if args.mode == 'init':
        return run_init(config)
    if args.mode == 'stats':
        return run_stats(config)

    from web.backend.app import main as serve
    serve(config)
    return 0


if __name__ == "__main__":
    sys.exit(main())
