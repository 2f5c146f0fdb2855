# Identity labels linking loosely coupled objects to each other by name
COMPONENT_LABEL = "appstudio.openshift.io/component"
APPLICATION_LABEL = "appstudio.openshift.io/application"
SNAPSHOT_LABEL = "appstudio.openshift.io/snapshot"
ENVIRONMENT_LABEL = "appstudio.openshift.io/environment"
SCENARIO_LABEL = "test.appstudio.openshift.io/scenario"

OPTIONAL_SCENARIO_LABEL = "test.appstudio.openshift.io/optional"
AUTO_RELEASE_LABEL = "release.appstudio.openshift.io/auto-release"

PIPELINE_TYPE_LABEL = "pipelines.appstudio.openshift.io/type"
PIPELINE_TYPE_BUILD = "build"
PIPELINE_TYPE_TEST = "test"

# Annotations are carried through but never interpreted by the loader
INSTALLATION_ID_ANNOTATION = "pac.test.appstudio.openshift.io/installation-id"
UPDATE_COMPONENT_ON_SUCCESS_ANNOTATION = "appstudio.redhat.com/updateComponentOnSuccess"
