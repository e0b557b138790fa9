# assessments/forms.py

from django import forms
from django.core.exceptions import ValidationError

from .metrics import reading_level, round_one_decimal, running_record_accuracy, self_correction_ratio
from .models import RunningRecord


class RunningRecordForm(forms.ModelForm):
    """
    Form for recording a reading running record.
    Accuracy, reading level and self-correction ratio are derived on save.
    """
    total_words = forms.IntegerField(required=False)
    errors = forms.IntegerField(required=False)
    self_corrections = forms.IntegerField(required=False)

    class Meta:
        model = RunningRecord
        fields = ['student', 'record_date', 'text_title', 'total_words', 'errors', 'self_corrections', 'notes']
        error_messages = {
            'student': {'required': "Select a student for the running record."},
            'record_date': {
                'required': "Enter a date for the running record (YYYY-MM-DD).",
                'invalid': "Date format should be YYYY-MM-DD.",
            },
        }

    def clean_total_words(self):
        total_words = self.cleaned_data.get('total_words') or 0
        if total_words <= 0:
            raise ValidationError("Total words must be greater than 0.")
        return total_words

    def clean_errors(self):
        return self.cleaned_data.get('errors') or 0

    def clean_self_corrections(self):
        return self.cleaned_data.get('self_corrections') or 0

    def clean(self):
        cleaned_data = super().clean()
        errors = cleaned_data.get('errors', 0)
        self_corrections = cleaned_data.get('self_corrections', 0)
        if errors < 0 or self_corrections < 0:
            raise ValidationError("Errors and self-corrections must be 0 or more.")
        return cleaned_data

    def save(self, commit=True):
        record = super().save(commit=False)
        # The level is taken from the unrounded accuracy
        accuracy = running_record_accuracy(record.total_words, record.errors)
        record.accuracy_pct = round_one_decimal(accuracy)
        record.level = reading_level(accuracy)
        record.sc_ratio = self_correction_ratio(record.errors, record.self_corrections)
        record.text_title = record.text_title.strip()
        record.notes = record.notes.strip()
        if commit:
            record.save()
        return record
