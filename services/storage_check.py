from database.errors import StorageError


def check_storage(store):
    try:
        details = store.ping()

        return {
            'status': 'healthy',
            'service': store.backend,
            'message': f'Movie store ({store.backend}) is reachable',
            'details': details
        }

    except StorageError as e:
        return {
            'status': 'unhealthy',
            'service': store.backend,
            'message': f'Storage error: {str(e)}'
        }
    except Exception as e:
        return {
            'status': 'unhealthy',
            'service': store.backend,
            'message': f'Unexpected error: {str(e)}'
        }
