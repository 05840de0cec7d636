"""Sort order for advocate listing queries."""

from sqlalchemy.sql.elements import UnaryExpression

from advocates.models.advocate import Advocate
from advocates.schemas.advocate import SortDirection, SortField

# Primary sort column per field; None means the (last, first) name pair
_PRIMARY_COLUMNS = {
    SortField.NAME: None,
    SortField.DEGREE: Advocate.degree,
    SortField.CITY: Advocate.city,
    SortField.EXPERIENCE: Advocate.years_of_experience,
}


def _directed(column, direction: SortDirection) -> UnaryExpression:
    return column.desc() if direction == SortDirection.DESC else column.asc()


def build_order_by(
    sort_field: SortField | None,
    sort_direction: SortDirection = SortDirection.ASC,
) -> list[UnaryExpression]:
    """
    Build a fully determined ORDER BY list.

    Direction applies to the primary key only. Last name, first name and id
    always follow in ascending order as tiebreakers. Without a sort field the
    order is (last name, first name) ascending whatever the direction.
    """
    tiebreak = [Advocate.last_name.asc(), Advocate.first_name.asc(), Advocate.id.asc()]

    if sort_field is None or sort_field not in _PRIMARY_COLUMNS:
        return tiebreak

    primary = _PRIMARY_COLUMNS[sort_field]
    if primary is None:
        return [
            _directed(Advocate.last_name, sort_direction),
            _directed(Advocate.first_name, sort_direction),
            Advocate.id.asc(),
        ]
    return [_directed(primary, sort_direction), *tiebreak]
