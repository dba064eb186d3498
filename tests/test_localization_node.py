import numpy as np
import pytest

from particle_localization.localization_node import LocalizationNode, build_parser, main


def make_node(*argv):
    return LocalizationNode(build_parser().parse_args(list(argv)))


def test_parser_defaults():
    args = build_parser().parse_args([])
    assert args.particles == 100
    assert args.resampler == 'wheel'
    assert not args.plot


@pytest.mark.parametrize('resampler', ['wheel', 'systematic'])
def test_simulation_tracks_vehicle(resampler):
    node = make_node('--seed', '5', '--steps', '60', '--resampler', resampler)
    estimates, errors = node.run()
    assert estimates.shape == (60, 3)
    assert errors.shape == (60, 2)
    assert len(node.particle_filter.particles) == 100
    assert np.mean(errors[:, 0]) < 1.0
    assert np.max(errors[:, 1]) < 0.1


def test_simulation_with_map_file(tmp_path):
    map_file = tmp_path / 'map_data.txt'
    map_file.write_text('10.0 5.0 1\n-5.0 20.0 2\n25.0 -10.0 3\n15.0 30.0 4\n')
    node = make_node('--seed', '2', '--steps', '20', '--map', str(map_file), '-n', '50')
    assert [landmark.id for landmark in node.landmark_map] == [1, 2, 3, 4]
    node.run()
    assert len(node.truth) == 20


def test_observations_in_vehicle_frame():
    node = make_node('--seed', '0', '--sigma-landmark', '1e-9', '--sensor-range', '1000')
    observations = node.observe()
    assert len(observations) == len(node.landmark_map)
    # Vehicle at the origin facing +x: vehicle frame equals map frame
    for observation, landmark in zip(observations, node.landmark_map):
        assert observation == pytest.approx((landmark.x, landmark.y), abs=1e-6)


def test_plot(monkeypatch):
    monkeypatch.setattr('matplotlib.pyplot.pause', lambda interval: None)
    monkeypatch.setattr('matplotlib.pyplot.show', lambda: None)
    node = make_node('--seed', '1', '--steps', '3', '--plot', '--plot-every', '1')
    node.run()


def test_main():
    assert main(['--seed', '3', '--steps', '5', '-n', '20', '-v']) == 0
