# ray_tracer.py
"""
The Ray Tracer Challenge - Main package module
"""
import logging

from utils.constants import LOG_FORMAT, LOG_DATE_FORMAT

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format=LOG_FORMAT,
    datefmt=LOG_DATE_FORMAT
)

# Import main components to expose them at package level
from domain.geometry.constants import EPSILON
from domain.geometry.scalar import Float, Ordering
from domain.geometry.tuples import Tuple, make_tuple, point, vector
from models.parameters import SimulationParameters
from models.projectile import Projectile, Environment, tick
from models.simulation import SimulationResult, run_simulation

# Make them available when someone does 'import ray_tracer'
__all__ = [
    'EPSILON',
    'Float',
    'Ordering',
    'Tuple',
    'make_tuple',
    'point',
    'vector',
    'SimulationParameters',
    'Projectile',
    'Environment',
    'tick',
    'SimulationResult',
    'run_simulation',
]

# This allows running the package directly
if __name__ == "__main__":
    from main import main
    main()
