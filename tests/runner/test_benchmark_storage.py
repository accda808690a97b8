import matplotlib
matplotlib.use("Agg")

from experiments.benchmark_storage import run_benchmark, plot_comparisons


def test_benchmark_stack_and_queue_agree(tmp_path):
    df = run_benchmark(densities=[0.3], num_trials=2)

    assert set(df['Storage']) == {'STACK', 'QUEUE'}
    assert (df['AgreeRate'] == 100.0).all()
    assert (df['SolvedRate'] == 100.0).all()
    # 两种 Storage 找到的最短长度一致
    assert df['LengthMean'].nunique() == 1

    outfile = tmp_path / "comparison.png"
    plot_comparisons(df, str(outfile))
    assert outfile.exists()
