#!/usr/bin/env python3
'''
Measurement model for point landmarks observed in the vehicle frame.
'''

import numpy as np

from particle_localization.errors import EmptyMapError
from particle_localization.landmark_map import Observation


def transform_observation(x, y, theta, observation):
    '''
    Transform an observation from the vehicle frame of a particle at
    [x, y, θ] to the map frame: rotate by θ, then translate by (x, y).
    '''
    cos_theta = np.cos(theta)
    sin_theta = np.sin(theta)
    x_map = x + observation[0] * cos_theta - observation[1] * sin_theta
    y_map = y + observation[0] * sin_theta + observation[1] * cos_theta
    return Observation(x_map, y_map)


def inverse_transform_observation(x, y, theta, observation):
    '''
    Transform a map frame point back to the vehicle frame of a particle at
    [x, y, θ]: translate by -(x, y), then rotate by -θ.
    '''
    dx = observation[0] - x
    dy = observation[1] - y
    cos_theta = np.cos(theta)
    sin_theta = np.sin(theta)
    return Observation(dx * cos_theta + dy * sin_theta,
                       -dx * sin_theta + dy * cos_theta)


def data_association(observation, landmark_map):
    '''
    Index of the landmark closest to a map frame observation. Ties keep the
    landmark found first.
    '''
    if len(landmark_map) == 0:
        raise EmptyMapError('Cannot associate an observation with an empty map')
    closest_index = 0
    min_dist = np.inf
    for index, landmark in enumerate(landmark_map):
        dist = np.hypot(observation[0] - landmark.x, observation[1] - landmark.y)
        if dist < min_dist:
            min_dist = dist
            closest_index = index
    return closest_index


def norm_pdf_2d(x, y, mu_x, mu_y, std_x, std_y):
    '''
    Bivariate normal density with independent axes:
        1/(2π σx σy) exp(-(dx²/(2σx²) + dy²/(2σy²)))
    '''
    dx = x - mu_x
    dy = y - mu_y
    exponent = dx ** 2 / (2 * std_x ** 2) + dy ** 2 / (2 * std_y ** 2)
    return np.exp(-exponent) / (2 * np.pi * std_x * std_y)


class MeasurementModel():
    def __init__(self, std_landmark):
        '''
        Input:
            std_landmark: landmark measurement standard deviations [σx, σy]
                          in the map frame.
        '''
        if len(std_landmark) != 2:
            raise ValueError('std_landmark must have 2 elements, got %d' % len(std_landmark))
        if std_landmark[0] <= 0 or std_landmark[1] <= 0:
            raise ValueError('std_landmark must be positive, got %r' % (list(std_landmark),))
        self.std_x = std_landmark[0]
        self.std_y = std_landmark[1]


    def update_weight(self, particle, observations, landmark_map):
        '''
        Overwrite the particle weight with the likelihood of all observations,
        associating each one to its nearest landmark. The associations are
        stored on the particle for debugging.
        '''
        particle.weight = 1.0
        associations = []
        sense_x = []
        sense_y = []
        for observation in observations:
            transformed = transform_observation(particle.x, particle.y, particle.theta, observation)
            landmark = landmark_map[data_association(transformed, landmark_map)]
            particle.weight *= norm_pdf_2d(
                transformed.x, transformed.y,
                landmark.x, landmark.y,
                self.std_x, self.std_y)
            associations.append(landmark.id)
            sense_x.append(transformed.x)
            sense_y.append(transformed.y)
        particle.weight = float(particle.weight)
        particle.set_associations(associations, sense_x, sense_y)
        return particle.weight


