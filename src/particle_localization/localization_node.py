#!/usr/bin/env python3
'''
Runs the particle filter against a simulated vehicle driving through a
landmark map. The vehicle follows an arc, observes every landmark within
sensor range with noise, and the filter estimate is compared to the true
pose at each step. Optionally plots the particles while running.
'''

import argparse
import logging

import matplotlib.pyplot as plt
import numpy as np

from particle_localization.landmark_map import LandmarkMap, Observation, read_map_data
from particle_localization.measurement_model import inverse_transform_observation
from particle_localization.motion_model import MotionModel
from particle_localization.particle_filter import DEFAULT_NUM_PARTICLES, ParticleFilter
from particle_localization.resampling import RESAMPLERS

logger = logging.getLogger(__name__)


class LocalizationNode:

    def __init__(self, args):
        self.args = args
        # Simulation has its own generator so the filter's draws stay independent
        self.sim_rng = np.random.default_rng(None if args.seed is None else args.seed + 1)
        self.motion_model = MotionModel()

        self.load_parameters()

        # Initialize Algorithm
        self.particle_filter = ParticleFilter(
            num_particles=args.particles,
            resampler=args.resampler,
            seed=args.seed)
        self.landmark_map = self.load_map()

        # Ground truth and estimates as [x, y, theta] rows
        self.truth = np.array([[0.0, 0.0, 0.0]])
        self.estimates = np.zeros((0, 3))
        self.errors = np.zeros((0, 2))


    def load_parameters(self):
        '''
        Noise and control parameters of the simulation.
        '''
        args = self.args
        self.delta_t = args.delta_t
        self.velocity = args.velocity
        self.yaw_rate = args.yaw_rate
        self.sensor_range = args.sensor_range
        self.sigma_pos = [args.sigma_init, args.sigma_init, args.sigma_init_theta]
        self.std_pos = [args.sigma_pos, args.sigma_pos, args.sigma_theta]
        self.std_landmark = [args.sigma_landmark, args.sigma_landmark]
        logger.info('Particles:        %d', args.particles)
        logger.info('Resample method:  %s', args.resampler)
        logger.info('Control:          v=%.2f, yaw_rate=%.3f, dt=%.3f',
                    self.velocity, self.yaw_rate, self.delta_t)


    def load_map(self):
        if self.args.map:
            return read_map_data(self.args.map)
        # Random landmarks around the vehicle path
        positions = self.sim_rng.uniform(-self.args.map_size, self.args.map_size,
                                         size=(self.args.landmarks, 2))
        logger.info('Generated %d random landmarks', self.args.landmarks)
        return LandmarkMap((i + 1, p[0], p[1]) for i, p in enumerate(positions))


    def observe(self):
        '''
        Noisy vehicle frame observations of every landmark within sensor range
        of the true pose.
        '''
        x, y, theta = self.truth[-1]
        observations = []
        for landmark in self.landmark_map:
            if np.hypot(landmark.x - x, landmark.y - y) > self.sensor_range:
                continue
            local = inverse_transform_observation(x, y, theta, (landmark.x, landmark.y))
            observations.append(Observation(
                local.x + self.sim_rng.normal(0.0, self.std_landmark[0]),
                local.y + self.sim_rng.normal(0.0, self.std_landmark[1])))
        return observations


    def step(self, iteration):
        '''
        One filter tick: initialize on the first call, otherwise
        predict, weight and resample.
        '''
        if iteration == 0:
            x, y, theta = self.truth[-1]
            # Noisy first estimate, as a GPS would give
            self.particle_filter.init(
                x + self.sim_rng.normal(0.0, self.sigma_pos[0]),
                y + self.sim_rng.normal(0.0, self.sigma_pos[1]),
                theta + self.sim_rng.normal(0.0, self.sigma_pos[2]),
                self.sigma_pos)
        else:
            # Update ground truth
            x_t = self.motion_model.sample_real_model_velocity(
                *self.truth[-1], self.delta_t, self.velocity, self.yaw_rate)
            self.truth = np.append(self.truth, [x_t], axis=0)
            self.particle_filter.prediction(
                self.delta_t, self.std_pos, self.velocity, self.yaw_rate)
            observations = self.observe()
            self.particle_filter.update_weights(
                self.sensor_range, self.std_landmark, observations, self.landmark_map)

        best = self.particle_filter.best_particle()
        self.estimates = np.append(self.estimates, [[best.x, best.y, best.theta]], axis=0)
        truth = self.truth[-1]
        position_error = float(np.hypot(best.x - truth[0], best.y - truth[1]))
        heading_error = float(abs(np.arctan2(np.sin(best.theta - truth[2]),
                                             np.cos(best.theta - truth[2]))))
        self.errors = np.append(self.errors, [[position_error, heading_error]], axis=0)
        logger.debug('Step %d: position error %.3f, heading error %.4f, associations [%s]',
                     iteration, position_error, heading_error,
                     self.particle_filter.get_associations(best))

        if iteration > 0:
            self.particle_filter.resample()


    def run(self):
        for iteration in range(self.args.steps):
            self.step(iteration)
            if self.args.plot and iteration % self.args.plot_every == 0:
                self.plot()
        logger.info('Mean position error: %.3f', float(np.mean(self.errors[:, 0])))
        logger.info('Mean heading error:  %.4f', float(np.mean(self.errors[:, 1])))
        if self.args.plot:
            plt.show()
        return self.estimates, self.errors


    def plot(self):
        # Clear all
        plt.cla()
        positions = self.landmark_map.positions()
        plt.scatter(positions[:, 0], positions[:, 1], s=40, c='b', marker='x', label='Landmarks')
        # Plot particles
        x = [particle.x for particle in self.particle_filter.particles]
        y = [particle.y for particle in self.particle_filter.particles]
        plt.scatter(x, y, s=5, c='k', alpha=0.5, label='Particles')
        plt.plot(self.truth[:, 0], self.truth[:, 1], 'orange', label='Ground truth')
        plt.plot(self.estimates[:, 0], self.estimates[:, 1], 'r', label='Best particle')
        # Plot arrow for estimated heading
        arrow_length = 2.0
        plt.quiver(
            self.estimates[-1, 0],
            self.estimates[-1, 1],
            arrow_length * np.cos(self.estimates[-1, 2]),
            arrow_length * np.sin(self.estimates[-1, 2]),
            angles='xy',
            scale_units='xy',
            scale=1,
            color='g',
            width=0.005)
        # Plot configurations
        plt.axis('equal')
        plt.legend(loc='lower left')
        plt.pause(1e-3)


def build_parser():
    parser = argparse.ArgumentParser(description='Particle filter localization simulation')
    parser.add_argument('-n', '--particles', type=int, default=DEFAULT_NUM_PARTICLES,
                        help='Number of particles.')
    parser.add_argument('--steps', type=int, default=200, help='Number of filter steps.')
    parser.add_argument('--seed', type=int, default=None, help='Random seed for reproducible runs.')
    parser.add_argument('-r', '--resampler', choices=RESAMPLERS, default='wheel',
                        help='Resampling method.')
    parser.add_argument('-m', '--map', default=None,
                        help='Map file with "x y id" rows. Random landmarks if omitted.')
    parser.add_argument('--landmarks', type=int, default=30, help='Number of random landmarks.')
    parser.add_argument('--map-size', type=float, default=60.0,
                        help='Half width of the square holding the random landmarks.')
    parser.add_argument('--delta-t', type=float, default=0.1, help='Time between steps [s].')
    parser.add_argument('--velocity', type=float, default=5.0, help='Vehicle velocity [m/s].')
    parser.add_argument('--yaw-rate', type=float, default=0.1, help='Vehicle yaw rate [rad/s].')
    parser.add_argument('--sensor-range', type=float, default=50.0, help='Sensor range [m].')
    parser.add_argument('--sigma-init', type=float, default=0.3,
                        help='Initial position uncertainty [m].')
    parser.add_argument('--sigma-init-theta', type=float, default=0.01,
                        help='Initial heading uncertainty [rad].')
    parser.add_argument('--sigma-pos', type=float, default=0.1, help='Position process noise [m].')
    parser.add_argument('--sigma-theta', type=float, default=0.01, help='Heading process noise [rad].')
    parser.add_argument('--sigma-landmark', type=float, default=0.3,
                        help='Landmark measurement noise [m].')
    parser.add_argument('-p', '--plot', action='store_true', help='Plot the particles while running.')
    parser.add_argument('--plot-every', type=int, default=5, help='Plot every N steps.')
    parser.add_argument('-v', '--verbose', action='store_true', help='Log every filter step.')
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(asctime)s %(levelname)s %(name)s: %(message)s')
    # Create an instance of the LocalizationNode class
    localization_node = LocalizationNode(args)
    localization_node.run()
    return 0


if __name__ == '__main__':
    raise SystemExit(main())
