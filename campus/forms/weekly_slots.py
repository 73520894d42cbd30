from django import forms

from campus.services.weekly_slots_service import all_slot_keys, parse_slot_key


class WeeklySlotsForm(forms.Form):
    slots = forms.MultipleChoiceField(
        choices=[(key, key) for key in all_slot_keys()],
        required=False,
        error_messages={
            'invalid_choice': "%(value)s is not a valid time slot.",
        },
    )

    def selected_slots(self):
        """Validated slots as (day, time) pairs."""
        return [parse_slot_key(value) for value in self.cleaned_data.get('slots', [])]
