#!/usr/bin/env python3
'''
Read-only landmark map and the observation type reported by the sensor.
'''

import logging
from collections import namedtuple

import numpy as np

logger = logging.getLogger(__name__)

# Landmark position in the map frame
Landmark = namedtuple('Landmark', ['id', 'x', 'y'])

# Landmark measurement in the vehicle frame
Observation = namedtuple('Observation', ['x', 'y'])


class LandmarkMap:
    '''
    Immutable ordered set of landmarks. Iteration order is the order the
    landmarks were given in, which data association uses to break ties.
    '''

    def __init__(self, landmarks=()):
        landmarks = tuple(Landmark(int(lm[0]), float(lm[1]), float(lm[2])) for lm in landmarks)
        ids = [landmark.id for landmark in landmarks]
        if len(set(ids)) != len(ids):
            raise ValueError('Landmark ids must be unique')
        self._landmarks = landmarks

    @property
    def landmark_list(self):
        return self._landmarks

    def __len__(self):
        return len(self._landmarks)

    def __iter__(self):
        return iter(self._landmarks)

    def __getitem__(self, index):
        return self._landmarks[index]

    def __repr__(self):
        return 'LandmarkMap(%d landmarks)' % len(self._landmarks)

    def positions(self):
        '''(M, 2) array of landmark positions.'''
        return np.array([[lm.x, lm.y] for lm in self._landmarks]).reshape(-1, 2)


def read_map_data(filename):
    '''
    Read a map file with one landmark per line: "x y id", whitespace separated.
    '''
    data = np.loadtxt(filename, ndmin=2)
    if data.size == 0:
        logger.warning('Map file %s has no landmarks', filename)
        return LandmarkMap()
    if data.shape[1] != 3:
        raise ValueError('Expected 3 columns (x y id) in %s, found %d' % (filename, data.shape[1]))
    landmarks = [(int(row[2]), row[0], row[1]) for row in data]
    logger.info('Loaded %d landmarks from %s', len(landmarks), filename)
    return LandmarkMap(landmarks)
