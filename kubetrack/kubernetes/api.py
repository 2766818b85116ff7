'''
Reads live objects from a cluster for the command line. The tracking core never
calls this: it only ever sees the objects handed to it.
'''

from kubernetes import config
from kubernetes.client.rest import ApiException
from kubernetes.dynamic import DynamicClient
from kubernetes.dynamic.exceptions import ResourceNotFoundError

from kubetrack.exceptions import KubeCLIError
from kubetrack.log import logger


def list_kube_contexts():
    '''
    Returns the kubeconfig context names and the active context name.
    '''

    try:
        contexts, active_context = config.list_kube_config_contexts()
    except config.ConfigException as e:
        raise KubeCLIError('Could not read kubeconfig: {0}'.format(e))

    if not contexts:
        raise KubeCLIError('Cannot find any context in kube-config file.')

    return [context['name'] for context in contexts], active_context['name']


def get_live_object(env, api_version, kind, name, namespace=None):
    '''
    Fetch one object as a dict, or ``None`` if it doesn't exist.
    '''

    dynamic_client = _get_dynamic_client(env)

    try:
        resource = dynamic_client.resources.get(api_version=api_version, kind=kind)
    except ResourceNotFoundError:
        raise KubeCLIError('The target cluster has no resource {0} {1}'.format(api_version, kind))

    logger.debug('Reading live {0} {1} (namespace={2})'.format(kind, name, namespace))

    try:
        if namespace and resource.namespaced:
            obj = resource.get(name=name, namespace=namespace)
        else:
            obj = resource.get(name=name)
    except ApiException as e:
        if e.status == 404:
            return None
        raise

    return obj.to_dict()


def _get_dynamic_client(env):
    return DynamicClient(_get_api_client(env))


def _get_api_client(env):
    return config.new_client_from_config(context=env)
