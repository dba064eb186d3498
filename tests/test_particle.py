import pytest

from particle_localization.particle import Particle


def test_new_particle_has_no_associations():
    particle = Particle(3, 1.0, 2.0, 0.5)
    assert particle.weight == 1.0
    assert particle.pose == (1.0, 2.0, 0.5)
    assert particle.associations == particle.sense_x == particle.sense_y == []


def test_set_associations_replaces_all_three():
    particle = Particle(0, 0.0, 0.0, 0.0)
    particle.set_associations([1, 2], [5.0, 2.5], [3.0, 1.0])
    particle.set_associations([4], [7.0], [4.0])
    assert particle.associations == [4]
    assert particle.sense_x == [7.0]
    assert particle.sense_y == [4.0]


def test_set_associations_rejects_unequal_lengths():
    particle = Particle(0, 0.0, 0.0, 0.0)
    particle.set_associations([1], [5.0], [3.0])
    with pytest.raises(ValueError):
        particle.set_associations([1, 2], [5.0], [3.0, 1.0])
    # Unchanged after a rejected update
    assert particle.associations == [1]


def test_debug_strings_have_no_trailing_separator():
    particle = Particle(0, 0.0, 0.0, 0.0)
    particle.set_associations([1, 12, 3], [5.0, 2.5, -1.0], [3.0, 1.25, 0.0])
    assert particle.get_associations() == '1 12 3'
    assert particle.get_sense_coord('X') == '5 2.5 -1'
    assert particle.get_sense_coord('Y') == '3 1.25 0'


def test_debug_strings_empty():
    particle = Particle(0, 0.0, 0.0, 0.0)
    assert particle.get_associations() == ''
    assert particle.get_sense_coord('X') == ''


def test_get_sense_coord_rejects_unknown_axis():
    with pytest.raises(ValueError):
        Particle(0, 0.0, 0.0, 0.0).get_sense_coord('Z')
