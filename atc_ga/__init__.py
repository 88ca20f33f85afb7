"""
Pacote AG ATC - escalonamento de pousos em pista única
"""
from .constants import *
from .exceptions import ATCError, AlgorithmException, ConfigurationError, InstanceError
from .aircraft import Aircraft, AircraftStaticData
from .evaluator import FitnessEvaluator
from .scheduler import LandingTimeScheduler, SCHEDULING_STRATEGIES
from .sequences import LandingSequenceCreator, IndividualCreator, ORDERING_STRATEGIES
from .model import Individual, Parents, Solution
from .population import Population, PopulationConfig, PopulationInitializer
from .operators import SelectionOperator, CrossoverOperator, MutationOperator
from .ga import GeneticAlgorithm, GAState
from .io_instance import parse_instance, load_instance, schedule_to_dataframe, write_schedule_csv

__all__ = [
    "Aircraft", "AircraftStaticData", "FitnessEvaluator",
    "LandingTimeScheduler", "SCHEDULING_STRATEGIES",
    "LandingSequenceCreator", "IndividualCreator", "ORDERING_STRATEGIES",
    "Individual", "Parents", "Solution",
    "Population", "PopulationConfig", "PopulationInitializer",
    "SelectionOperator", "CrossoverOperator", "MutationOperator",
    "GeneticAlgorithm", "GAState",
    "parse_instance", "load_instance", "schedule_to_dataframe", "write_schedule_csv",
    "ATCError", "AlgorithmException", "ConfigurationError", "InstanceError",
]
