from flask import Blueprint, current_app, jsonify, request
from werkzeug.exceptions import BadRequest

from hiscore import RULES_EXTENSION
from hiscore.services.scores.errors import SubmissionRejected
from hiscore.services.scores.parsing import parse_optional_number
from hiscore.services.scores.sessions import issue_session
from hiscore.services.scores.store import list_scores
from hiscore.services.scores.submissions import submit_score

scores = Blueprint('scores', __name__)


def _rules():
    return current_app.extensions[RULES_EXTENSION]


@scores.route('/', methods=['GET'])
def list_hi_scores():
    gig_param = request.args.get('gig')
    shift_param = request.args.get('shift')

    gig_id = parse_optional_number(gig_param)
    shift_id = parse_optional_number(shift_param)

    if gig_param and gig_id is None:
        return jsonify({'error': 'Invalid gig value'}), 400
    if shift_param and shift_id is None:
        return jsonify({'error': 'Invalid shift value'}), 400

    rows = [s.to_dict() for s in list_scores(_rules().result_limit, gig_id, shift_id)]
    return jsonify({'count': len(rows), 'rows': rows})


@scores.route('/words', methods=['GET'])
def list_words():
    return jsonify(list(_rules().words))


@scores.route('/start', methods=['POST'])
def start_session():
    session = issue_session()
    return jsonify(session.to_dict())


@scores.route('/submit-score', methods=['POST'])
def submit():
    try:
        body = request.get_json(force=True)
    except BadRequest:
        return jsonify({'error': 'Invalid JSON body'}), 400

    try:
        hi_score = submit_score(body, _rules(), ip_addr=request.remote_addr)
    except SubmissionRejected as exc:
        return jsonify({'error': exc.message}), 400

    return jsonify({'result': hi_score.to_dict()})
