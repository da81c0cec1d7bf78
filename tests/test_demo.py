import matplotlib

matplotlib.use("Agg")

from kmeans_sandbox.clustering.demo import main  # noqa: E402


def test_demo_writes_plot(tmp_path, capsys):
    output_path = tmp_path / "clusters.png"

    score = main(num_clusters=3, seed=0, output_path=str(output_path))

    assert output_path.exists()
    assert -1.0 <= score <= 1.0
    assert "Adjusted Rand index" in capsys.readouterr().out
