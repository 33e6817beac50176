from marshmallow import Schema, fields, validate
from feedbox.utils.enums import AVATARS


class StudentLoginSchema(Schema):
    email = fields.Email(required=True)
    password = fields.Str(required=True, validate=validate.Length(min=1))
    avatar = fields.Str(load_default=AVATARS[0], validate=validate.OneOf(AVATARS))


class AdminLoginSchema(Schema):
    username = fields.Str(required=True, validate=validate.Length(min=1))
    password = fields.Str(required=True, validate=validate.Length(min=1))


class AvatarUpdateSchema(Schema):
    avatar = fields.Str(required=True, validate=validate.OneOf(AVATARS))
