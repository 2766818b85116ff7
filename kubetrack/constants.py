APP_INSTANCE_LABEL_KEY = 'app.kubernetes.io/instance'
APP_INSTANCE_ANNOTATION_KEY = 'kubetrack.io/tracking-id'
INSTALLATION_ID_ANNOTATION_KEY = 'kubetrack.io/installation-id'

CRD_GROUP = 'apiextensions.k8s.io'
CRD_KIND = 'CustomResourceDefinition'
