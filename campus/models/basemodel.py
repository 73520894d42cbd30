from campus.models import TimeStampedModel


class BaseModel(TimeStampedModel):
    class Meta:
        abstract = True
