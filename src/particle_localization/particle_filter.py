#!/usr/bin/env python3
'''
Particle filter localization against a known landmark map.
See Monte Carlo Localization, chapter 8 of Probabilistic Robotics by
Sebastian Thrun, Wolfram Burgard and Dieter Fox.
'''

import copy
import logging

import numpy as np

from particle_localization.errors import (
    DegenerateWeightError,
    OutOfSequenceError,
    UninitializedFilterError,
)
from particle_localization.measurement_model import MeasurementModel
from particle_localization.motion_model import MotionModel
from particle_localization.particle import Particle
from particle_localization.resampling import RESAMPLERS, systematic_resample, wheel_resample

logger = logging.getLogger(__name__)

DEFAULT_NUM_PARTICLES = 100
DEFAULT_RESAMPLER = 'wheel'

# Filter states
UNINITIALIZED = 'uninitialized'
INITIALIZED = 'initialized'
PREDICTED = 'predicted'
WEIGHTED = 'weighted'
RESAMPLED = 'resampled'


class ParticleFilter():

    def __init__(self, num_particles=DEFAULT_NUM_PARTICLES, resampler=DEFAULT_RESAMPLER, seed=None):
        '''
        Input:
            num_particles: number of particles N, fixed for the filter lifetime.
            resampler: 'wheel' (resampling wheel) or 'systematic'.
            seed: seed of the filter's random generator. None draws fresh
                  entropy from the OS; an int makes runs reproducible. The
                  generator is created once and advances across calls.
        '''
        if num_particles < 1:
            raise ValueError('num_particles must be at least 1, got %r' % (num_particles,))
        if resampler not in RESAMPLERS:
            raise ValueError('resampler must be one of %s, got %r' % (RESAMPLERS, resampler))
        self.num_particles = int(num_particles)
        self.resampler = resampler
        self.rng = np.random.default_rng(seed)
        self.motion_model = MotionModel()
        self.particles = []
        self.max_weight = 0.0
        self.state = UNINITIALIZED


    @property
    def is_initialized(self):
        return self.state != UNINITIALIZED


    def _check_state(self, operation, *allowed):
        if self.state == UNINITIALIZED:
            raise UninitializedFilterError('%s called before init' % operation)
        if self.state not in allowed:
            raise OutOfSequenceError(
                '%s not allowed after %s, expected one of: %s'
                % (operation, self.state, ', '.join(allowed)))


    def init(self, x, y, theta, std):
        '''
        Spread the particles around the first pose estimate [x, y, θ] with
        standard deviations std = [σx, σy, σθ]. Every particle starts with
        weight 1. Calling it again reinitializes the filter.
        '''
        if len(std) != 3:
            raise ValueError('std must have 3 elements, got %d' % len(std))
        if any(s < 0 for s in std):
            raise ValueError('std must be non-negative, got %r' % (list(std),))
        particles = []
        for i in range(self.num_particles):
            # Apply Gaussian noise to initial position of the particles
            particles.append(Particle(
                i,
                float(self.rng.normal(x, std[0])),
                float(self.rng.normal(y, std[1])),
                float(self.rng.normal(theta, std[2])),
                1.0))
        self.particles = particles
        self.max_weight = 0.0
        self.state = INITIALIZED
        logger.info('Initialized %d particles around (%.3f, %.3f, %.3f)',
                    self.num_particles, x, y, theta)


    def prediction(self, delta_t, std_pos, velocity, yaw_rate):
        '''
        Move every particle with the velocity motion model and process noise
        std_pos = [σx, σy, σθ].
        '''
        self._check_state('prediction', INITIALIZED, RESAMPLED)
        if delta_t <= 0:
            raise ValueError('delta_t must be positive, got %r' % (delta_t,))
        if len(std_pos) != 3:
            raise ValueError('std_pos must have 3 elements, got %d' % len(std_pos))
        if any(s < 0 for s in std_pos):
            raise ValueError('std_pos must be non-negative, got %r' % (list(std_pos),))
        for particle in self.particles:
            self.motion_model.sample_motion_model_velocity(
                particle,
                delta_t,
                std_pos,
                velocity,
                yaw_rate,
                self.rng)
        self.state = PREDICTED


    def update_weights(self, sensor_range, std_landmark, observations, landmark_map):
        '''
        Weight every particle by the likelihood of the observations (vehicle
        frame) given the map. Observations are expected to be within
        sensor_range already.
        '''
        self._check_state('update_weights', PREDICTED)
        measurement_model = MeasurementModel(std_landmark)
        logger.debug('Updating weights with %d observations (sensor range %s)',
                     len(observations), sensor_range)
        # Reset max weight
        max_weight = 0.0
        for particle in self.particles:
            weight = measurement_model.update_weight(particle, observations, landmark_map)
            if weight > max_weight:
                max_weight = weight
        self.max_weight = max_weight
        if max_weight == 0.0:
            raise DegenerateWeightError(
                'All %d particle weights are zero, no particle explains the observations'
                % self.num_particles)
        self.state = WEIGHTED
        logger.debug('Max weight %.6g, effective sample size %.1f',
                     self.max_weight, self.effective_sample_size())


    def resample(self):
        '''
        Draw N particles with replacement, with probability proportional to
        their weight.
        '''
        self._check_state('resample', WEIGHTED)
        weights = self.weights()
        if self.resampler == 'wheel':
            new_indexes = wheel_resample(weights, self.max_weight, self.rng)
        else:
            new_indexes = systematic_resample(weights, self.rng)
        # Update new particles
        new_particles = []
        for index in new_indexes:
            new_particles.append(copy.deepcopy(self.particles[index]))
        self.particles = new_particles
        self.state = RESAMPLED


    def weights(self):
        self._check_state('weights', INITIALIZED, PREDICTED, WEIGHTED, RESAMPLED)
        return np.array([particle.weight for particle in self.particles])


    def effective_sample_size(self):
        '''
        1 / Σ w², with the weights normalized to sum 1.
        '''
        self._check_state('effective_sample_size', INITIALIZED, PREDICTED, WEIGHTED, RESAMPLED)
        weights = self.weights()
        total = np.sum(weights)
        if total <= 0:
            return 0.0
        weights = weights / total
        return float(1.0 / np.sum(weights ** 2))


    def best_particle(self):
        '''
        Particle with the highest weight.
        '''
        self._check_state('best_particle', INITIALIZED, PREDICTED, WEIGHTED, RESAMPLED)
        # Extract the weights from the particles to find the best one
        return self.particles[int(np.argmax(self.weights()))]


    def mean_pose(self):
        '''
        Weighted average position of the particles, with the circular mean
        of the headings.
        '''
        self._check_state('mean_pose', INITIALIZED, PREDICTED, WEIGHTED, RESAMPLED)
        weights = self.weights()
        if np.sum(weights) <= 0:
            weights = np.ones(self.num_particles)
        x = np.average([particle.x for particle in self.particles], weights=weights)
        y = np.average([particle.y for particle in self.particles], weights=weights)
        theta = np.arctan2(
            np.average([np.sin(particle.theta) for particle in self.particles], weights=weights),
            np.average([np.cos(particle.theta) for particle in self.particles], weights=weights))
        return float(x), float(y), float(theta)


    def get_associations(self, particle):
        return particle.get_associations()


    def get_sense_coord(self, particle, coord):
        return particle.get_sense_coord(coord)
