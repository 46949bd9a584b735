from typing import Annotated

from annotated_types import Interval, MultipleOf

# poles and the antimeridian are excluded
Latitude = Annotated[float, Interval(gt=-90, lt=90)]
Longitude = Annotated[float, Interval(gt=-180, lt=180)]
Zoom = Annotated[float, Interval(ge=4, le=19.75), MultipleOf(0.25)]
