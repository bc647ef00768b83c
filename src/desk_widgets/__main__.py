import argparse
import logging
import typing as tp

from .config import Config, setupLogging
from .persistent import Persistent
from .stopwatch_UI import StopwatchUI
from .todo_store import TodoStore
from .todo_UI import TodoUI

log = logging.getLogger(__name__)

def parseArgs(argv: tp.Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog='desk-widgets',
        description='A terminal stopwatch and a persistent to-do list.',
    )
    parser.add_argument('--log-level', default=None, help='e.g. DEBUG, INFO.')
    parser.add_argument('--log-file', default=None, help='Write logs here.')
    sub = parser.add_subparsers(dest='widget', required=True)
    stopwatch = sub.add_parser('stopwatch', help='Start / pause / reset.')
    stopwatch.add_argument(
        '--interval', type=float, default=None, 
        help='Seconds per tick (default 1).',
    )
    todo = sub.add_parser('todo', help='Add / toggle / delete tasks.')
    todo.add_argument(
        '--storage', default=None, help='JSON file to keep tasks in.',
    )
    return parser.parse_args(argv)

def main(argv: tp.Sequence[str] | None = None) -> None:
    args = parseArgs(argv)
    config = Config.load(
        log_level=args.log_level,
        log_file=args.log_file,
        tick_seconds=getattr(args, 'interval', None),
        storage_path=getattr(args, 'storage', None),
    )
    setupLogging(config)
    log.info('Launching %s with %r', args.widget, config)
    match args.widget:
        case 'stopwatch':
            StopwatchUI(tick_seconds=config.tick_seconds).run()
        case 'todo':
            store = TodoStore(Persistent(config.storage_path))
            TodoUI(store).run()

if __name__ == '__main__':
    main()
