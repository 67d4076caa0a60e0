"""Domain errors raised by the services and translated at the API boundary."""

from fastapi import status


class ContactBookError(Exception):
    """Base error carrying the HTTP status and message returned to callers."""

    status_code: int = status.HTTP_400_BAD_REQUEST
    message: str = "Requisição inválida"

    def __init__(self, message: str | None = None) -> None:
        if message is not None:
            self.message = message
        super().__init__(self.message)


class ClientNotFound(ContactBookError):
    """The referenced client does not exist."""

    status_code = status.HTTP_400_BAD_REQUEST
    message = "Usuário não encontrado"


class ContactNotFound(ContactBookError):
    """The referenced contact does not exist for this client."""

    status_code = status.HTTP_404_NOT_FOUND
    message = "Contato não encontrado"


class MissingContactChannel(ContactBookError):
    """Neither an email nor a phone was provided."""

    status_code = status.HTTP_404_NOT_FOUND
    message = "Insira pelo menos um telefone ou email"


class DuplicateContactChannel(ContactBookError):
    """The email or phone is already registered for this client."""

    status_code = status.HTTP_400_BAD_REQUEST
    message = "O email do usuário já foi cadastrado"
