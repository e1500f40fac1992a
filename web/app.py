"""
web/app.py

Flask-сервис: таблица углов как оракул только для чтения.
"""

import os
import sys
import time

from flask import Flask, request, jsonify

# Добавляем корень проекта в path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from core.cubie import CubieCube
from core.moves import apply_sequence
from cube_io import table_file
from cube_io.parser import parse_moves, parse_corners, format_moves
from cube_io.visualizer import format_corners
from heuristics.corner_index import CORNER_STATES, encode_corners
from heuristics.pattern_db import get_corner_table
from utils.error_handling import CornerPdbError, TableIOError
from utils.logging import get_logger

app = Flask(__name__)
# None: общая таблица процесса или table_file.TABLE_FILE
app.config.setdefault('TABLE_PATH', None)

logger = get_logger()


def get_table():
    """
    Таблица для запросов: общая таблица процесса (heuristics.pattern_db).

    Raises:
        TableIOError: если таблицы нет
    """
    return get_corner_table(app.config.get('TABLE_PATH'))


def _bad_request(message: str):
    logger.warning(f"/api/lookup: {message}")
    return jsonify({'success': False, 'error': message}), 400


@app.route('/api/info', methods=['GET'])
def info():
    """Сведения о таблице: путь, загружена ли, распределение расстояний."""
    path = app.config.get('TABLE_PATH') or table_file.TABLE_FILE
    try:
        table = get_table()
    except TableIOError as e:
        return jsonify({
            'success': False,
            'loaded': False,
            'table_path': path,
            'error': str(e)
        }), 503

    histogram = table.distance_histogram()
    return jsonify({
        'success': True,
        'loaded': True,
        'table_path': path,
        'states': CORNER_STATES,
        'assigned': table.assigned_count(),
        'histogram': {str(d): c for d, c in enumerate(histogram) if c}
    })


@app.route('/api/lookup', methods=['POST'])
def lookup():
    """
    Расстояние углов конфигурации до сборки.

    Входные данные:
    {
        "moves": "R U R' U'"            // скрамбл от собранного куба
    }
    или
    {
        "corners": "UFL1 URF2 ULB ..."  // углы по слотам URF..DRB
    }
    """
    data = request.get_json(silent=True)
    if data is None:
        data = {}
    if not isinstance(data, dict):
        return _bad_request("Тело запроса должно быть JSON-объектом")

    moves_text = data.get('moves')
    corners_text = data.get('corners')

    if moves_text is None and corners_text is None:
        return _bad_request("Нужно поле 'moves' или 'corners'")
    for field, value in (('moves', moves_text), ('corners', corners_text)):
        if value is not None and not isinstance(value, str):
            return _bad_request(f"Поле '{field}' должно быть строкой")

    try:
        if corners_text is not None:
            cube = parse_corners(corners_text)
            moves = None
        else:
            moves = parse_moves(moves_text)
            cube = apply_sequence(CubieCube.solved(), moves)
    except CornerPdbError as e:
        return _bad_request(str(e))

    try:
        table = get_table()
    except TableIOError as e:
        return jsonify({'success': False, 'error': str(e)}), 503

    start = time.time()
    index = encode_corners(cube)
    distance = table.get(index)
    elapsed = time.time() - start

    response = {
        'success': True,
        'index': index,
        'distance': distance,
        'assigned': table.is_set(index),
        'corners': format_corners(cube),
        'time': round(elapsed, 6)
    }
    if moves is not None:
        response['moves'] = format_moves(moves)
        response['move_count'] = len(moves)
    return jsonify(response)


if __name__ == '__main__':
    app.run(debug=False, port=int(os.environ.get('PORT', 5000)))
