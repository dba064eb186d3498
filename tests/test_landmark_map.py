import pytest

from particle_localization.landmark_map import Landmark, LandmarkMap, read_map_data


def test_map_keeps_order(landmark_map):
    assert [landmark.id for landmark in landmark_map] == [1, 2, 3, 4, 5]
    assert landmark_map[0] == Landmark(1, 5.0, 3.0)
    assert len(landmark_map) == 5
    assert landmark_map.positions().shape == (5, 2)


def test_map_is_read_only(landmark_map):
    with pytest.raises(AttributeError):
        landmark_map[0].x = 1.0
    with pytest.raises(TypeError):
        landmark_map.landmark_list[0] = Landmark(9, 0.0, 0.0)


def test_duplicate_ids_rejected():
    with pytest.raises(ValueError):
        LandmarkMap([(1, 0.0, 0.0), (1, 1.0, 1.0)])


def test_empty_map():
    landmark_map = LandmarkMap()
    assert len(landmark_map) == 0
    assert landmark_map.positions().shape == (0, 2)


def test_read_map_data(tmp_path):
    map_file = tmp_path / 'map_data.txt'
    map_file.write_text('92.064\t-34.777\t1\n61.109\t-47.132\t2\n17.42 -4.5712 3\n')
    landmark_map = read_map_data(str(map_file))
    assert len(landmark_map) == 3
    assert landmark_map[1] == Landmark(2, 61.109, -47.132)


def test_read_map_data_wrong_columns(tmp_path):
    map_file = tmp_path / 'map_data.txt'
    map_file.write_text('1.0 2.0\n3.0 4.0\n')
    with pytest.raises(ValueError):
        read_map_data(str(map_file))
