# 绘图逻辑 (Matplotlib)

import math
import numpy as np
import matplotlib.pyplot as plt
from matplotlib.colors import ListedColormap

from tracer.types import CellKind

# 颜色与 CellKind 编码一一对应: OPEN, CLOSED, TRACE, START, END
_CELL_COLORS = ListedColormap(['white', 'dimgray', 'khaki', 'limegreen', 'crimson'])


class BoardPlotter:
    """
    电路板 + 最短走线的可视化 (GUI 输出模式)
    每条最短路径画在一个子图中。
    """

    def __init__(self, board, max_columns: int = 4):
        self.board = board
        self.max_columns = max_columns

    def draw(self, paths, visit_counts: np.ndarray = None):
        n = max(1, len(paths))
        ncols = min(n, self.max_columns)
        nrows = math.ceil(n / ncols)
        fig, axes = plt.subplots(nrows, ncols, figsize=(4 * ncols, 4 * nrows), squeeze=False)

        for i, ax in enumerate(axes.flat):
            if i >= n:
                ax.axis('off')
                continue
            self._draw_board(ax, visit_counts)
            if paths:
                self._draw_path(ax, paths[i])
                ax.set_title(f"Path {i + 1} | length={paths[i].length()}")
            else:
                ax.set_title("No path found")

        fig.suptitle(f"Shortest traces: {len(paths)}")
        plt.tight_layout()
        return fig

    def show(self, paths, visit_counts: np.ndarray = None):
        self.draw(paths, visit_counts)
        plt.show()

    def save(self, paths, outfile: str, visit_counts: np.ndarray = None):
        fig = self.draw(paths, visit_counts)
        fig.savefig(outfile)
        plt.close(fig)  # Ensure closure
        print(f"Visualization saved to: {outfile}")

    def _draw_board(self, ax, visit_counts):
        # A. 画静态底图 (行号向下增长，与文本输出一致)
        ax.imshow(self.board.data, cmap=_CELL_COLORS, vmin=0, vmax=len(CellKind) - 1)

        # B. 搜索热力图 (可选)
        if visit_counts is not None:
            masked = np.ma.masked_where(visit_counts == 0, visit_counts)
            ax.imshow(masked, cmap='Blues', alpha=0.4)

        ax.set_xticks(np.arange(-0.5, self.board.cols, 1), minor=True)
        ax.set_yticks(np.arange(-0.5, self.board.rows, 1), minor=True)
        ax.grid(which='minor', color='lightgray', linestyle=':', linewidth=0.5)
        ax.set_aspect('equal')

    def _draw_path(self, ax, path):
        # 从起点画起，x 为列，y 为行
        start = self.board.start_position()
        cells = [start] + list(path.path)
        xs = [c.col for c in cells]
        ys = [c.row for c in cells]
        ax.plot(xs, ys, 'b-', linewidth=2.5)
        ax.scatter(xs[1:], ys[1:], c='blue', s=10, zorder=5)
