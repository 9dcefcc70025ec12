BADREQUEST = 400
NOTFOUND = 404
CONFLICT = 409
UNPROCESSABLEENTITY = 422
INTERNALSERVERERROR = 500
