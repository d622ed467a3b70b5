from typing import Optional

from fastapi import APIRouter, Depends, Response, status

from persons import database
from persons.models import Person
from persons.responses import to_response
from persons.service import PersonService

# routes return ready-made responses, response_model only documents the body in OpenAPI
router = APIRouter(prefix="/persons")


def get_service() -> PersonService:
    return PersonService(database.ENGINE)


@router.get("", tags=["person"], response_model=list[Person])
def list_all(service: PersonService = Depends(get_service)) -> Response:
    return to_response(service.list_all())


# registered before "/{person_id}" so "search" is never parsed as an id
@router.get("/search", tags=["person"], response_model=list[Person])
def search(name: Optional[str] = None, service: PersonService = Depends(get_service)) -> Response:
    return to_response(service.search(name))


@router.get("/{person_id}", tags=["person"], response_model=Person, responses={status.HTTP_404_NOT_FOUND: {}})
def get(person_id: int, service: PersonService = Depends(get_service)) -> Response:
    return to_response(service.get(person_id))


@router.post("", tags=["person"], response_model=Person, status_code=status.HTTP_201_CREATED)
def insert(person_data: Person, service: PersonService = Depends(get_service)) -> Response:
    return to_response(service.create(person_data), status_code=status.HTTP_201_CREATED)


@router.put("/{person_id}", tags=["person"], response_model=Person, responses={status.HTTP_404_NOT_FOUND: {}})
def update(person_id: int, person_data: Person, service: PersonService = Depends(get_service)) -> Response:
    return to_response(service.update(person_id, person_data))


@router.delete(
    "/{person_id}",
    tags=["person"],
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={status.HTTP_404_NOT_FOUND: {}},
)
def delete(person_id: int, service: PersonService = Depends(get_service)) -> Response:
    return to_response(service.delete(person_id), status_code=status.HTTP_204_NO_CONTENT)
