import sys
import os
import time
import numpy as np
import pandas as pd
import matplotlib.pyplot as plt

# --- 路径设置 ---
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from tracer.board.generator import BoardGenerator
from tracer.search.tracer import CircuitTracer
from tracer.visualization.observers import ExperimentObserver
from experiments.benchmark_config import BenchmarkConfig as cfg


def path_set(paths):
    """结果集合 (与顺序无关)"""
    return {p.path for p in paths}


def run_benchmark(densities=None, num_trials=None) -> pd.DataFrame:
    densities = cfg.DENSITIES if densities is None else densities
    num_trials = cfg.NUM_TRIALS if num_trials is None else num_trials
    results = []

    print(f"{'Density':<10} | {'Storage':<8} | {'Solved%':<8} | {'Time(ms)':<10} | {'Stored':<10} | {'Len':<6} | {'Agree%':<6}")
    print("-" * 80)

    for density in densities:
        stats = {mode: {'solved': 0, 'time': [], 'stored': [], 'length': []} for mode in cfg.MODES}
        agree = 0

        for i in range(num_trials):
            # A. 同一 seed 生成同一张板子，保证两种 Storage 在同一问题上比较
            seed = cfg.RANDOM_SEED_BASE + i + int(density * 1000)
            generator = BoardGenerator(obstacle_density=density,
                                       extra_corridors=cfg.EXTRA_CORRIDORS, seed=seed)
            board = generator.generate(cfg.ROWS, cfg.COLS, cfg.START, cfg.END)

            found = {}
            for mode in cfg.MODES:
                tracer = CircuitTracer(mode)
                observer = ExperimentObserver()

                t0 = time.perf_counter()
                paths = tracer.trace(board, observer)
                t1 = time.perf_counter()

                found[mode] = path_set(paths)
                if paths:
                    stats[mode]['solved'] += 1
                    stats[mode]['length'].append(paths[0].length())
                stats[mode]['time'].append((t1 - t0) * 1000)
                stats[mode]['stored'].append(len(observer.stored_states))

            # B. 栈与队列的结果集合应当一致
            if len({frozenset(s) for s in found.values()}) == 1:
                agree += 1

        # --- 汇总当前 Density 的数据 ---
        agree_rate = agree / num_trials * 100
        for mode in cfg.MODES:
            solved = stats[mode]['solved'] / num_trials * 100
            avg_time = np.mean(stats[mode]['time'])
            avg_stored = np.mean(stats[mode]['stored'])
            avg_len = np.mean(stats[mode]['length']) if stats[mode]['length'] else 0

            print(f"{density:<10.2f} | {mode.name:<8} | {solved:<8.1f} | {avg_time:<10.2f} | {avg_stored:<10.1f} | {avg_len:<6.2f} | {agree_rate:<6.1f}")

            results.append({
                'Density': density,
                'Storage': mode.name,
                'SolvedRate': solved,
                'TimeMean': avg_time,
                'StoredMean': avg_stored,
                'LengthMean': avg_len,
                'AgreeRate': agree_rate,
            })

    return pd.DataFrame(results)


def plot_comparisons(df: pd.DataFrame, outfile: str = None):
    """可视化对比图表"""
    fig, axes = plt.subplots(1, 3, figsize=(18, 5))

    metrics = [
        ('TimeMean', 'Computation Time (ms)', 'Time'),
        ('StoredMean', 'Stored States', 'Space'),
        ('LengthMean', 'Shortest Length', 'Optimality'),
    ]

    for ax, (metric, ylabel, title) in zip(axes, metrics):
        for name, marker in (('STACK', 'o-'), ('QUEUE', 's-')):
            data = df[df['Storage'] == name]
            ax.plot(data['Density'], data[metric], marker, label=name)
        ax.set_xlabel('Obstacle Density')
        ax.set_ylabel(ylabel)
        ax.set_title(title)
        ax.grid(True, linestyle=':', alpha=0.6)

    axes[0].legend()
    plt.tight_layout()
    if outfile:
        fig.savefig(outfile)
        plt.close(fig)
        print(f"Visualization saved to: {outfile}")
    else:
        plt.show()


if __name__ == "__main__":
    print("=== 开始 Storage 对比实验 (Stack vs Queue) ===")
    df_results = run_benchmark()
    print("\n实验结束，正在绘图...")

    os.makedirs(cfg.LOG_DIR, exist_ok=True)
    df_results.to_csv(os.path.join(cfg.LOG_DIR, "results.csv"), index=False)
    plot_comparisons(df_results, os.path.join(cfg.LOG_DIR, "comparison.png"))
