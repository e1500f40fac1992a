#!/usr/bin/env python3
"""
main.py

Точка входа для генератора таблицы углов.

Использование:
    python main.py generate -o corners.pdb         # полная генерация (часы)
    python main.py generate --max-depth 5          # пробный прогон, без записи
    python main.py lookup -t corners.pdb "R U R' U'"
    python main.py info -t corners.pdb
    python main.py verify -t corners.pdb --depth 5
    python main.py profile --max-count 100000
"""

import sys
import argparse
import logging

from core.cubie import CubieCube
from core.moves import apply_sequence
from cube_io import table_file
from cube_io.parser import parse_moves, parse_corners, format_moves
from cube_io.visualizer import format_corners, format_histogram, format_stats
from analysis.verify import cross_check_table
from heuristics.corner_index import CORNER_STATES, encode_corners
from solvers.corner_generator import CornerTableGenerator, PROGRESS_INTERVAL
from heuristics.corner_table import CornerTable
from heuristics.pattern_db import get_corner_table
from utils.error_handling import CornerPdbError, TableIOError
from utils.logging import get_logger, setup_file_logging


def cmd_generate(args) -> int:
    table = CornerTable()
    generator = CornerTableGenerator(progress_interval=args.progress, verbose=args.verbose)

    print(f"\n🔧 Генерация таблицы углов ({CORNER_STATES} состояний)")
    print("-" * 50)
    result = generator.generate(table, CubieCube.solved(),
                                max_depth=args.max_depth, max_count=args.max_count)

    print(format_stats(result.stats))
    print()
    print(format_histogram(table.distance_histogram(), total=CORNER_STATES))

    if not result.complete:
        print(f"\n⚠️  Генерация неполная ({result.reason}): таблица НЕ сохранена")
        return 2

    if not table_file.save_table(table, args.output):
        print(f"\n❌ Не удалось записать {args.output}")
        return 1

    print(f"\n✅ Таблица сохранена: {args.output}")
    return 0


def _load_or_fail(path):
    try:
        return get_corner_table(path)
    except TableIOError as e:
        print(f"❌ {e}")
        return None


def cmd_lookup(args) -> int:
    try:
        if args.corners:
            cube = parse_corners(args.position)
            moves = None
        else:
            moves = parse_moves(args.position)
            cube = apply_sequence(CubieCube.solved(), moves)
    except CornerPdbError as e:
        print(f"❌ Ошибка: {e}")
        return 1

    table = _load_or_fail(args.table)
    if table is None:
        return 1

    index = encode_corners(cube)
    if moves is not None:
        print(f"Ходы:       {format_moves(moves)} ({len(moves)})")
    print(f"Углы:       {format_corners(cube)}")
    print(f"Индекс:     {index}")
    print(f"Расстояние: {table.get(index)}")
    return 0


def cmd_info(args) -> int:
    table = _load_or_fail(args.table)
    if table is None:
        return 1

    print(f"\n📊 {args.table}")
    print(format_histogram(table.distance_histogram(),
                           root_known=table.root_index is not None,
                           total=CORNER_STATES))
    return 0


def cmd_verify(args) -> int:
    table = _load_or_fail(args.table)
    if table is None:
        return 1

    mismatches = cross_check_table(table, args.depth, sample=args.sample)
    if mismatches:
        print(f"❌ Расхождений: {len(mismatches)}")
        for index, actual, expected in mismatches[:10]:
            print(f"  index={index}: в таблице {actual}, по BFS {expected}")
        return 1

    print(f"✅ Таблица совпадает с BFS до глубины {args.depth}")
    return 0


def cmd_profile(args) -> int:
    from tools.profiler import profile_generation

    result, report = profile_generation(args.max_count, sort_by=args.sort, limit=args.limit)
    print(f"Статус: {result.status.value}, {result.stats}")
    print(report)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='Corner pattern database for the 3x3x3 cube',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Примеры:
  python main.py generate -o corners.pdb
  python main.py lookup "R U2 F'"
  python main.py lookup --corners "UFL URF ULB UBR DFR DLF DBL DRB"
  python main.py verify --depth 4 --sample 1000
        """
    )
    parser.add_argument('--verbose', '-v', action='store_true', help='Подробный лог')
    parser.add_argument('--log-file', help='Дублировать лог в файл')
    sub = parser.add_subparsers(dest='command', required=True)

    gen = sub.add_parser('generate', help='Сгенерировать таблицу')
    gen.add_argument('--output', '-o', default=table_file.TABLE_FILE,
                     help=f'Файл таблицы (default: {table_file.TABLE_FILE})')
    gen.add_argument('--max-depth', type=int, help='Остановиться после этого уровня (без записи)')
    gen.add_argument('--max-count', type=int, help='Остановиться после N состояний (без записи)')
    gen.add_argument('--progress', type=int, default=PROGRESS_INTERVAL,
                     help='Отчёт каждые N извлечений со стека (0 — выкл.)')
    gen.set_defaults(func=cmd_generate)

    look = sub.add_parser('lookup', help='Расстояние углов позиции')
    look.add_argument('position', help="Ходы от собранного куба: \"R U R' U'\"")
    look.add_argument('--corners', action='store_true',
                      help='position — углы по слотам URF..DRB, а не ходы')
    look.add_argument('--table', '-t', default=table_file.TABLE_FILE)
    look.set_defaults(func=cmd_lookup)

    inf = sub.add_parser('info', help='Распределение расстояний')
    inf.add_argument('--table', '-t', default=table_file.TABLE_FILE)
    inf.set_defaults(func=cmd_info)

    ver = sub.add_parser('verify', help='Сверить таблицу с BFS')
    ver.add_argument('--table', '-t', default=table_file.TABLE_FILE)
    ver.add_argument('--depth', type=int, default=4)
    ver.add_argument('--sample', type=int, help='Проверить случайную выборку')
    ver.set_defaults(func=cmd_verify)

    prof = sub.add_parser('profile', help='Профилировать урезанную генерацию')
    prof.add_argument('--max-count', type=int, default=100_000)
    prof.add_argument('--sort', default='cumulative', choices=['cumulative', 'time', 'calls'])
    prof.add_argument('--limit', type=int, default=20)
    prof.set_defaults(func=cmd_profile)

    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    logger = get_logger()
    if args.verbose:
        logger.set_level(logging.DEBUG)
    if args.log_file:
        setup_file_logging(args.log_file)

    print("=" * 50)
    print("🎲 Corner Pattern Database")
    print("=" * 50)
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
