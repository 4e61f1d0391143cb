from repository.rental_store import RentalStore, generate_id

__all__ = ['RentalStore', 'generate_id']
