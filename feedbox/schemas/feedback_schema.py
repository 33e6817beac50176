from marshmallow import Schema, fields, validate
from feedbox.utils.enums import CATEGORIES, FeedbackStatus


class FeedbackSchema(Schema):
    category = fields.Str(load_default=CATEGORIES[0], validate=validate.OneOf(CATEGORIES))
    # Kept only for category "others"
    custom_category = fields.Str(data_key="customCategory", allow_none=True, load_default=None,
                                 validate=validate.Length(max=60))
    content = fields.Str(required=True, validate=validate.Length(max=5000))


class CommentSchema(Schema):
    text = fields.Str(required=True, validate=validate.Length(max=2000))


class StatusSchema(Schema):
    status = fields.Str(required=True, validate=validate.OneOf([s.value for s in FeedbackStatus]))
