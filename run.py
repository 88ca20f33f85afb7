# run.py
import sys
import argparse
import logging

from atc_ga import (
    GeneticAlgorithm, PopulationConfig, load_instance, write_schedule_csv,
    AlgorithmException, ConfigurationError, InstanceError,
)
from atc_ga.constants import *


def parse_args(argv=None):
    p = argparse.ArgumentParser(description="Escalonamento de pousos com algoritmo genético")
    p.add_argument("instance", help="arquivo da instância (formato OR-Library airland)")
    p.add_argument("--population", type=int, default=DEFAULT_MAX_INDIVIDUALS)
    p.add_argument("--generations", type=int, default=DEFAULT_MAX_GENERATIONS)
    p.add_argument("--reproduction-rate", type=float, default=DEFAULT_REPRODUCTION_RATE)
    p.add_argument("--mutation-rate", type=float, default=DEFAULT_MUTATION_RATE)
    p.add_argument("--seed", type=int, default=SEED)
    p.add_argument("--workers", type=int, default=WORKERS)
    p.add_argument("--deadline", type=float, default=None, help="limite de tempo em segundos")
    p.add_argument("--output", default="schedule.csv")
    p.add_argument("--verbose", action="store_true")
    return p.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    try:
        aircrafts = load_instance(args.instance)
    except InstanceError as e:
        print(f"Erro na instância: {e}")
        return 1

    try:
        config = PopulationConfig(args.population, args.reproduction_rate, args.mutation_rate)
        ga = GeneticAlgorithm(
            aircrafts, config, max_generations=args.generations, seed=args.seed,
            n_workers=args.workers, deadline_seconds=args.deadline,
        )
    except ConfigurationError as e:
        print(f"Configuração inválida: {e}")
        return 1

    try:
        solution = ga.execute()
    except AlgorithmException as e:
        print(f"Falha no algoritmo: {e} ({e.cause!r})")
        return 2

    best = solution.best_individual
    print("\n" + "=" * 70)
    print("MELHOR SOLUÇÃO ENCONTRADA")
    print("=" * 70)
    print(f"Custo: {best.fitness if best.is_feasible() else 'inviável'}")
    print(f"Sequência: {[a.aircraft_id for a in best.sequence]}")
    print(f"Gerações: {solution.generation_count}/{solution.max_generations} "
          f"(sem melhora: {solution.generations_without_improvement}, parada: {solution.stopped_by})")
    print(f"Tempo: {solution.elapsed_seconds:.1f}s")
    print("=" * 70)

    write_schedule_csv(best, args.output)
    print(f"\nArquivo gerado: {args.output}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
