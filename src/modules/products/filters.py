from typing import Any, Dict

import django_filters

from modules.products.models import Product, ProductStatus


class ProductFilter(django_filters.FilterSet):
    name = django_filters.CharFilter(field_name="name", lookup_expr="icontains")
    status = django_filters.ChoiceFilter(
        field_name="status", choices=ProductStatus.choices
    )

    class Meta:
        model = Product
        fields = ["name", "status"]

    def lookups(self) -> Dict[str, Any]:
        """ORM look-ups for the validated, non-empty query parameters.

        Call only after ``is_valid()``.
        """
        return {
            f"{self.filters[name].field_name}__{self.filters[name].lookup_expr}": value
            for name, value in self.form.cleaned_data.items()
            if value not in (None, "")
        }
