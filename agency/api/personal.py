"""
API endpoints for the operator's own space: personal calendar, ideas and tasks
"""
from datetime import datetime

from flask import Blueprint, request, jsonify
from flask_jwt_extended import jwt_required, get_jwt_identity
from marshmallow import ValidationError

from agency.models.client import Client
from agency.models.personal import PersonalEvent, Idea, Task
from agency.schemas.personal_schema import PersonalEventSchema, IdeaSchema, TaskSchema
from agency.services.repository import EntityRepository

events_bp = Blueprint('personal_events', __name__)
ideas_bp = Blueprint('ideas', __name__)
tasks_bp = Blueprint('tasks', __name__)

event_schema = PersonalEventSchema()
idea_schema = IdeaSchema()
task_schema = TaskSchema()


def _validation_error(err):
    return jsonify({"error": "Validation failed", "details": err.messages}), 400


# -- Personal calendar ------------------------------------------------------

@events_bp.route('', methods=['GET'])
@jwt_required()
def list_events():
    """
    Diary entries, optionally limited to a date range.

    Query Parameters:
        - start (str, optional): YYYY-MM-DD
        - end (str, optional): YYYY-MM-DD
    """
    start = request.args.get('start')
    end = request.args.get('end')
    for name, value in (('start', start), ('end', end)):
        if value:
            try:
                datetime.strptime(value, '%Y-%m-%d')
            except ValueError:
                return jsonify({"error": f"{name} must be in YYYY-MM-DD format"}), 400

    events = EntityRepository(PersonalEvent, owner_id=get_jwt_identity(), default_order='date').list()
    events = [e for e in events if (not start or e.date >= start) and (not end or e.date <= end)]
    return jsonify({"events": [event.to_dict() for event in events]}), 200


@events_bp.route('', methods=['PUT'])
@jwt_required()
def save_event():
    """Create or replace the entry for the given date (one entry per day)."""
    data = request.get_json(silent=True) or {}
    try:
        validated = event_schema.load(data)
    except ValidationError as err:
        return _validation_error(err)

    repo = EntityRepository(PersonalEvent, owner_id=get_jwt_identity())
    existing = repo.filter({'date': validated['date']})
    if existing:
        event = repo.update(existing[0].event_id, validated)
        return jsonify({"event": event.to_dict()}), 200

    event = repo.create(validated)
    return jsonify({"event": event.to_dict()}), 201


@events_bp.route('/<event_id>', methods=['DELETE'])
@jwt_required()
def delete_event(event_id):
    if not EntityRepository(PersonalEvent, owner_id=get_jwt_identity()).delete(event_id):
        return jsonify({"error": "Event not found"}), 404
    return jsonify({"message": "Event deleted successfully"}), 200


# -- Ideas ------------------------------------------------------------------

@ideas_bp.route('', methods=['GET'])
@jwt_required()
def list_ideas():
    ideas = EntityRepository(Idea, owner_id=get_jwt_identity()).filter(
        {'client_id': request.args.get('client_id')},
        request.args.get('order')
    )
    return jsonify({"ideas": [idea.to_dict() for idea in ideas]}), 200


@ideas_bp.route('', methods=['POST'])
@jwt_required()
def create_idea():
    user_id = get_jwt_identity()
    data = request.get_json(silent=True) or {}
    try:
        validated = idea_schema.load(data)
    except ValidationError as err:
        return _validation_error(err)

    if validated.get('client_id') and not EntityRepository(Client, owner_id=user_id).get(validated['client_id']):
        return jsonify({"error": "Client not found"}), 404

    idea = EntityRepository(Idea, owner_id=user_id).create(validated)
    return jsonify({"idea": idea.to_dict()}), 201


@ideas_bp.route('/<idea_id>', methods=['DELETE'])
@jwt_required()
def delete_idea(idea_id):
    if not EntityRepository(Idea, owner_id=get_jwt_identity()).delete(idea_id):
        return jsonify({"error": "Idea not found"}), 404
    return jsonify({"message": "Idea deleted successfully"}), 200


# -- Tasks ------------------------------------------------------------------

@tasks_bp.route('', methods=['GET'])
@jwt_required()
def list_tasks():
    tasks = EntityRepository(Task, owner_id=get_jwt_identity()).list(request.args.get('order'))
    return jsonify({"tasks": [task.to_dict() for task in tasks]}), 200


@tasks_bp.route('', methods=['POST'])
@jwt_required()
def create_task():
    data = request.get_json(silent=True) or {}
    try:
        validated = task_schema.load(data)
    except ValidationError as err:
        return _validation_error(err)

    task = EntityRepository(Task, owner_id=get_jwt_identity()).create(validated)
    return jsonify({"task": task.to_dict()}), 201


@tasks_bp.route('/<task_id>/toggle', methods=['POST'])
@jwt_required()
def toggle_task(task_id):
    repo = EntityRepository(Task, owner_id=get_jwt_identity())
    task = repo.get(task_id)
    if not task:
        return jsonify({"error": "Task not found"}), 404
    task = repo.update(task_id, {'completed': not task.completed})
    return jsonify({"task": task.to_dict()}), 200


@tasks_bp.route('/<task_id>', methods=['DELETE'])
@jwt_required()
def delete_task(task_id):
    if not EntityRepository(Task, owner_id=get_jwt_identity()).delete(task_id):
        return jsonify({"error": "Task not found"}), 404
    return jsonify({"message": "Task deleted successfully"}), 200
