from django import forms

from .models import Product
from .validation import name_field, price_field, validate_product


class ProductForm(forms.Form):
    """
    HTML form for create/edit.
    Name and price use the same field rules as validate_product(), which
    clean() runs over the whole submission, so the page shows exactly the
    messages the API would return.
    """
    id = forms.IntegerField(required=False, widget=forms.HiddenInput)
    name = name_field()
    price = price_field()
    description = forms.CharField(required=False, empty_value=None, widget=forms.Textarea(attrs={'rows': 4}))

    @classmethod
    def for_product(cls, product):
        """Unbound form pre-populated from an existing product"""
        return cls(initial={
            'id': product.pk,
            'name': product.name,
            'price': product.price,
            'description': product.description,
        })

    def clean(self):
        cleaned_data = super().clean()
        result = validate_product(cleaned_data)
        for error in result.errors:
            # Fields that failed their own clean() already carry the message
            if error.field not in self.errors:
                self.add_error(error.field, error.message)
        if result.is_valid:
            cleaned_data.update(result.cleaned_data)
        return cleaned_data

    def to_product(self, instance=None):
        """Copy the validated values onto instance (or a new Product)"""
        product = instance if instance is not None else Product()
        product.name = self.cleaned_data['name']
        product.price = self.cleaned_data['price']
        product.description = self.cleaned_data['description']
        return product
