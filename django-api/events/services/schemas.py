"""Input schemas for actions.

Each schema is a DRF serializer; messages are user-facing and the first one
raised is what the caller sees. Event fields are stored exactly as sent, so
text fields do not trim whitespace.
"""

from rest_framework import serializers

from events.domain import ALL_SPORTS


class DateTimeInputField(serializers.DateTimeField):
    """DateTimeField that reports an empty string as missing, not malformed."""

    default_error_messages = {
        **serializers.DateTimeField.default_error_messages,
        "blank": "This field may not be blank.",
    }

    def to_internal_value(self, value):
        if isinstance(value, str) and not value.strip():
            self.fail("blank")
        return super().to_internal_value(value)


def _event_id_field() -> serializers.UUIDField:
    return serializers.UUIDField(
        error_messages={
            "required": "Event ID is required",
            "null": "Event ID is required",
            "invalid": "Invalid event ID",
        }
    )


class EventInputSerializer(serializers.Serializer):
    name = serializers.CharField(
        max_length=100,
        trim_whitespace=False,
        error_messages={
            "required": "Event name is required",
            "blank": "Event name is required",
            "null": "Event name is required",
            "max_length": "Event name must be less than 100 characters",
        },
    )
    sport_type = serializers.CharField(
        trim_whitespace=False,
        error_messages={
            "required": "Sport type is required",
            "blank": "Sport type is required",
            "null": "Sport type is required",
        },
    )
    date_time = DateTimeInputField(
        error_messages={
            "required": "Date and time is required",
            "blank": "Date and time is required",
            "null": "Date and time is required",
            "invalid": "Date and time is invalid",
        },
    )
    description = serializers.CharField(
        required=False,
        allow_blank=True,
        allow_null=True,
        max_length=1000,
        trim_whitespace=False,
        error_messages={
            "max_length": "Description must be less than 1000 characters",
        },
    )
    venues = serializers.ListField(
        child=serializers.CharField(
            trim_whitespace=False,
            error_messages={
                "blank": "Venue cannot be empty",
                "null": "Venue cannot be empty",
            },
        ),
        allow_empty=False,
        error_messages={
            "required": "At least one venue is required",
            "null": "At least one venue is required",
            "empty": "At least one venue is required",
            "not_a_list": "Venues must be a list",
        },
    )

    def validate_description(self, value):
        return value or None


class EventUpdateSerializer(EventInputSerializer):
    id = _event_id_field()


class EventDeleteSerializer(serializers.Serializer):
    id = _event_id_field()


class EventLookupSerializer(serializers.Serializer):
    id = _event_id_field()


class EventFilterSerializer(serializers.Serializer):
    search = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    sport_type = serializers.CharField(
        required=False, allow_blank=True, allow_null=True
    )

    def validate_search(self, value):
        return value or None

    def validate_sport_type(self, value):
        if not value or value == ALL_SPORTS:
            return None
        return value


class SignInSerializer(serializers.Serializer):
    email = serializers.EmailField(
        error_messages={
            "required": "Invalid email address",
            "blank": "Invalid email address",
            "invalid": "Invalid email address",
        },
    )
    password = serializers.CharField(
        min_length=6,
        trim_whitespace=False,
        error_messages={
            "required": "Password must be at least 6 characters",
            "blank": "Password must be at least 6 characters",
            "min_length": "Password must be at least 6 characters",
        },
    )


class SignUpSerializer(SignInSerializer):
    confirm_password = serializers.CharField(trim_whitespace=False)

    def validate(self, attrs):
        if attrs["password"] != attrs["confirm_password"]:
            raise serializers.ValidationError(
                {"confirm_password": "Passwords don't match"}
            )
        return attrs
