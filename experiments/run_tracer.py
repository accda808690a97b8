import os
import sys
import argparse

# --- Path Setup ---
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from tracer.config import StorageMode, OutputMode, TracerConfig
from tracer.exceptions import CircuitBoardError
from tracer.board.loader import load_board
from tracer.search.tracer import CircuitTracer
from tracer.visualization.observers import DebugObserver, ExperimentObserver
from tracer.visualization.console import print_solutions
from tracer.visualization.plotter import BoardPlotter

PROG = "run_tracer.py"
USAGE = "%(prog)s [-s|-q] [-c|-g] [filename]"


class TracerArgumentParser(argparse.ArgumentParser):
    """参数错误时打印用法并以退出码 1 结束 (argparse 默认为 2)"""

    def error(self, message):
        print("Usage: " + self.usage % {"prog": self.prog})
        print(message)
        sys.exit(1)


def build_parser() -> argparse.ArgumentParser:
    parser = TracerArgumentParser(prog=PROG, usage=USAGE, description="Search for all shortest traces on a circuit board.")

    storage = parser.add_mutually_exclusive_group(required=True)
    storage.add_argument("-s", dest="storage", action="store_const", const=StorageMode.STACK, help="use a stack (depth-first)")
    storage.add_argument("-q", dest="storage", action="store_const", const=StorageMode.QUEUE, help="use a queue (breadth-first)")

    output = parser.add_mutually_exclusive_group(required=True)
    output.add_argument("-c", dest="output", action="store_const", const=OutputMode.CONSOLE, help="print solutions to the console")
    output.add_argument("-g", dest="output", action="store_const", const=OutputMode.GUI, help="plot solutions with matplotlib")

    parser.add_argument("filename", help="circuit board file")
    parser.add_argument("--save", type=str, default=None, help="GUI mode: save the figure instead of showing it")
    parser.add_argument("--debug", action="store_true", help="write a debug log")
    parser.add_argument("--log-dir", type=str, default=TracerConfig.log_dir, help="debug log directory")
    return parser


def run(config: TracerConfig, filename: str, save: str = None) -> int:
    # 1. 加载电路板 (构造失败直接结束，不进行搜索)
    try:
        board = load_board(filename)
    except FileNotFoundError:
        print(f"FileNotFoundError: {filename}")
        return 1
    except CircuitBoardError as e:
        print(f"{type(e).__name__}: {e}")
        return 1

    # 2. 搜索
    observer = DebugObserver(log_dir=config.log_dir) if config.debug_mode else ExperimentObserver()
    observer.log(f"Loaded {os.path.basename(filename)}: {board.rows}x{board.cols}")
    tracer = CircuitTracer(config.storage_mode)
    paths = tracer.trace(board, observer=observer)

    # 3. 输出
    if config.output_mode == OutputMode.CONSOLE:
        print_solutions(paths)
    else:
        plotter = BoardPlotter(board)
        if save:
            plotter.save(paths, save, visit_counts=observer.visit_counts())
        else:
            plotter.show(paths, visit_counts=observer.visit_counts())

    if config.debug_mode:
        print(f"Debug log written to: {observer.log_file}")
        observer.close()
    return 0


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    config = TracerConfig(
        storage_mode=args.storage,
        output_mode=args.output,
        debug_mode=args.debug,
        log_dir=args.log_dir,
    )
    return run(config, args.filename, save=args.save)


if __name__ == "__main__":
    sys.exit(main())
