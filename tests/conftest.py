import matplotlib
import pytest

from particle_localization.landmark_map import LandmarkMap
from particle_localization.particle_filter import ParticleFilter

# No display is needed to run the simulation tests
matplotlib.use('Agg')


@pytest.fixture
def landmark_map():
    return LandmarkMap([(1, 5.0, 3.0), (2, 2.0, 1.0), (3, 6.0, 1.0), (4, 7.0, 4.0), (5, 4.0, 7.0)])


@pytest.fixture
def pf():
    particle_filter = ParticleFilter(num_particles=50, seed=42)
    particle_filter.init(0.0, 0.0, 0.0, [0.3, 0.3, 0.01])
    return particle_filter
