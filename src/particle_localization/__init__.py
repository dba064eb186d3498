'''
Monte Carlo localization of a vehicle against a known landmark map.
'''

from particle_localization.errors import (
    DegenerateWeightError,
    EmptyMapError,
    OutOfSequenceError,
    ParticleFilterError,
    UninitializedFilterError,
)
from particle_localization.landmark_map import Landmark, LandmarkMap, Observation
from particle_localization.particle import Particle
from particle_localization.particle_filter import ParticleFilter

__all__ = [
    'DegenerateWeightError',
    'EmptyMapError',
    'Landmark',
    'LandmarkMap',
    'Observation',
    'OutOfSequenceError',
    'Particle',
    'ParticleFilter',
    'ParticleFilterError',
    'UninitializedFilterError',
]
