# grouping/forms.py

from django import forms

from .partitioner import MIN_GROUP_SIZE, GroupingOptions


TRUE_VALUES = ('1', 'true', 'on', 'yes')


class OptionFlagField(forms.Field):
    """
    A checkbox-style flag that accepts JSON booleans as well as form values
    such as "on", "1" or "0". A missing or blank value cleans to None.
    """
    def __init__(self, **kwargs):
        kwargs.setdefault('required', False)
        super().__init__(**kwargs)

    def to_python(self, value):
        if value in self.empty_values:
            return None
        return str(value).strip().lower() in TRUE_VALUES


class GroupGenerationForm(forms.Form):
    """
    Validates a group generation request. Flags left out of the request keep
    the defaults of GroupingOptions.
    """
    class_id = forms.UUIDField(error_messages={
        'required': "Select a class to generate groups.",
        'invalid': "Select a class to generate groups.",
    })
    size = forms.IntegerField(min_value=MIN_GROUP_SIZE, error_messages={
        'required': "Group size must be 2 or more.",
        'invalid': "Group size must be 2 or more.",
        'min_value': "Group size must be 2 or more.",
    })
    prefix = forms.CharField(max_length=200, required=False, strip=True)
    clear_existing = OptionFlagField()
    balance_gender = OptionFlagField()
    balance_ability = OptionFlagField()
    pair_support_partners = OptionFlagField()
    respect_separations = OptionFlagField()

    OPTION_FIELDS = ('balance_gender', 'balance_ability', 'pair_support_partners', 'respect_separations')

    def get_options(self):
        given = {
            name: self.cleaned_data[name]
            for name in self.OPTION_FIELDS
            if self.cleaned_data.get(name) is not None
        }
        return GroupingOptions.from_mapping(given)


class SeparationConstraintForm(forms.Form):
    student_a = forms.UUIDField(error_messages={'required': "Select two different students.", 'invalid': "Select two different students."})
    student_b = forms.UUIDField(error_messages={'required': "Select two different students.", 'invalid': "Select two different students."})

    def clean(self):
        cleaned_data = super().clean()
        if cleaned_data.get('student_a') and cleaned_data.get('student_a') == cleaned_data.get('student_b'):
            raise forms.ValidationError("Select two different students.")
        return cleaned_data
