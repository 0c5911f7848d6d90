from collections.abc import Mapping

from rest_framework import serializers
from rest_framework.settings import api_settings

from .models import Product
from .validation import validate_product


class ProductSerializer(serializers.ModelSerializer):
    """
    Serializer for Product.
    Output uses the model fields; input goes through validate_product()
    so the API and the web form share one set of rules. The id is
    always assigned by the database and never read from the payload.
    """

    class Meta:
        model = Product
        fields = ['id', 'name', 'price', 'description']
        read_only_fields = ['id']

    def to_internal_value(self, data):
        if not isinstance(data, Mapping):
            raise serializers.ValidationError({
                api_settings.NON_FIELD_ERRORS_KEY: [
                    f'Invalid data. Expected a dictionary, but got {type(data).__name__}.'
                ]
            })
        result = validate_product(data)
        if not result.is_valid:
            raise serializers.ValidationError(result.as_dict())
        return result.cleaned_data
